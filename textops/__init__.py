# textops package
#
# Unified import surface for the text operations:
#
#   from textops import clean, align, wrap, truncate, is_hex, render_table
#
# Lazy loading: imports are deferred via __getattr__ so that library
# callers never load the CLI stack (rich, python-dotenv).

__version__ = "0.1.0"

# Mapping from public name -> (module_path, attribute_name)
_LAZY_IMPORTS = {
    # Width primitives
    "display_width": (".width", "display_width"),
    "pad_to_width": (".width", "pad_to_width"),
    # Cleaner
    "clean": (".cleaner", "clean"),
    # Aligner
    "Alignment": (".aligner", "Alignment"),
    "align": (".aligner", "align"),
    "left": (".aligner", "left"),
    "right": (".aligner", "right"),
    "center": (".aligner", "center"),
    # Wrapper / Truncator
    "wrap": (".wrapper", "wrap"),
    "wrap_text": (".wrapper", "wrap_text"),
    "truncate": (".truncator", "truncate"),
    # Classifier
    "is_numeric": (".classifier", "is_numeric"),
    "is_hex": (".classifier", "is_hex"),
    # Numbers
    "parse_number": (".numbers", "parse_number"),
    "format_number": (".numbers", "format_number"),
    # Field formatter
    "Frame": (".formatter", "Frame"),
    "TextFormatter": (".formatter", "TextFormatter"),
    # Tables
    "TableRenderer": (".table", "TableRenderer"),
    "TableStyle": (".table", "TableStyle"),
    "render_table": (".table", "render_table"),
    # Configuration and errors
    "TextOpsConfig": (".config", "TextOpsConfig"),
    "TextOpsError": (".errors", "TextOpsError"),
}

__all__ = list(_LAZY_IMPORTS) + ["__version__"]


def __getattr__(name):
    if name in _LAZY_IMPORTS:
        import importlib

        module_path, attr = _LAZY_IMPORTS[name]
        module = importlib.import_module(module_path, __name__)
        value = getattr(module, attr)
        globals()[name] = value
        return value
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
