import pytest

from css_selector_builder import (
    FragmentKind,
    FragmentValidator,
    Selector,
    DuplicateFragmentError,
    OrderViolationError,
    InvalidSelectorError
)

def test_root_fragment_always_valid():
    validator = FragmentValidator()
    for kind in FragmentKind:
        validator.validate_extension(None, kind)

def test_check_duplicate():
    validator = FragmentValidator()
    chain = Selector(FragmentKind.ID, "main")
    with pytest.raises(DuplicateFragmentError) as excinfo:
        validator.check_duplicate(chain, FragmentKind.ID)
    assert excinfo.value.kind is FragmentKind.ID

def test_repeatable_kinds_are_not_duplicates():
    validator = FragmentValidator()
    chain = Selector(FragmentKind.CLASS, "a")
    validator.check_duplicate(chain, FragmentKind.CLASS)
    validator.validate_extension(chain, FragmentKind.CLASS)

def test_check_order():
    validator = FragmentValidator()
    chain = Selector(FragmentKind.CLASS, "a")
    with pytest.raises(OrderViolationError) as excinfo:
        validator.check_order(chain, FragmentKind.ID)
    assert excinfo.value.kind is FragmentKind.ID

def test_duplicate_checked_before_order():
    validator = FragmentValidator()
    chain = Selector(FragmentKind.ID, "main").class_("a")
    with pytest.raises(DuplicateFragmentError):
        validator.validate_extension(chain, FragmentKind.ID)

def test_errors_are_invalid_selector_errors():
    validator = FragmentValidator()
    chain = Selector(FragmentKind.PSEUDO_ELEMENT, "before")
    with pytest.raises(InvalidSelectorError, match="arranged in the following order"):
        validator.validate_extension(chain, FragmentKind.CLASS)
