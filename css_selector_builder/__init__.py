# css_selector_builder/__init__.py
from .fragments import FragmentKind, FRAGMENT_ORDER, FRAGMENT_TEMPLATES, render_fragment
from .selector import Selector, CombinedSelector, Combinator
from .builder import CssSelectorBuilder, css_selector_builder
from .validators import FragmentValidator
from .models import Rectangle
from .exceptions import (
    ValidationError,
    ParseError,
    InvalidSelectorError,
    DuplicateFragmentError,
    OrderViolationError
)
from .utils import get_json, from_json, from_json_file, load_json_data

__version__ = "0.1.0"

__all__ = [
    # Main classes
    "CssSelectorBuilder",
    "css_selector_builder",
    "Selector",
    "CombinedSelector",
    "Combinator",
    "FragmentKind",
    "FragmentValidator",
    "Rectangle",

    # Fragment table
    "FRAGMENT_ORDER",
    "FRAGMENT_TEMPLATES",
    "render_fragment",

    # Exceptions
    "ValidationError",
    "ParseError",
    "InvalidSelectorError",
    "DuplicateFragmentError",
    "OrderViolationError",

    # Utility functions
    "get_json",
    "from_json",
    "from_json_file",
    "load_json_data"
]
