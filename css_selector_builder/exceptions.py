class ValidationError(Exception):
    """Base validation error."""
    pass

class ParseError(Exception):
    """Error serializing or deserializing data."""
    pass

class InvalidSelectorError(ValidationError):
    """Invalid selector error."""
    pass

class DuplicateFragmentError(InvalidSelectorError):
    """An element, id or pseudo-element fragment appears twice in one selector."""

    def __init__(self, kind, message: str = ""):
        self.kind = kind
        super().__init__(
            message
            or "Element, id and pseudo-element should not occur more then one time inside the selector"
        )

class OrderViolationError(InvalidSelectorError):
    """A fragment was appended after a fragment that must follow it."""

    def __init__(self, kind, message: str = ""):
        self.kind = kind
        super().__init__(
            message
            or "Selector parts should be arranged in the following order: "
            "element, id, class, attribute, pseudo-class, pseudo-element"
        )
