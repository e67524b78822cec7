"""Names that are never auto-linked, even when the catalog documents them."""

from collections.abc import Iterable

DEFAULT_IGNORE: frozenset[str] = frozenset(
    {
        # Dart core
        "String",
        "int",
        "double",
        "bool",
        "num",
        "dynamic",
        "void",
        "Object",
        "List",
        "Map",
        "Set",
        "Future",
        "Stream",
        "Iterable",
        "Type",
        "Function",
        "Null",
        "Never",
        "Record",
        "Duration",
        "DateTime",
        "Uri",
        "RegExp",
        "Error",
        "Exception",
        "Completer",
        "Timer",
        "StreamController",
        "Stopwatch",
        # Generic type parameters
        "T",
        "E",
        "K",
        "V",
        "R",
        "S",
        # Flutter widgets and framework
        "Widget",
        "BuildContext",
        "State",
        "StatelessWidget",
        "StatefulWidget",
        "Key",
        "GlobalKey",
        "InheritedWidget",
        "InheritedNotifier",
        "Navigator",
        "Route",
        "ModalRoute",
        "RouteObserver",
        "PageRoute",
        "MaterialApp",
        "Scaffold",
        "Text",
        "Center",
        "Column",
        "Row",
        "Container",
        "SizedBox",
        "Padding",
        "ElevatedButton",
        "TextButton",
        "CircularProgressIndicator",
        "MaterialPageRoute",
    }
)


def build_ignore_set(extra: Iterable[str] | None = None) -> frozenset[str]:
    """Extend the default ignore set with project-specific names."""
    return DEFAULT_IGNORE | frozenset(extra or ())
