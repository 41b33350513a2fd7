class PhosysFormatError(ValueError):
    """Base exception for malformed PHOSYS input."""


class NotAValidDocumentError(PhosysFormatError):
    """Raised when input does not open with the expected wrapper marker."""


class UnclosedBlockError(PhosysFormatError):
    """Raised by aborting diagnostics policies when a block never closes."""

    def __init__(self, block_name: str, lineno: int):
        self.block_name = block_name
        self.lineno = lineno
        super().__init__(f"Block {block_name!r} on line {lineno} is not closed")


class NodeNotFoundError(LookupError):
    """Raised when a leaf/container lookup has no matching direct child."""

    def __init__(self, kind: str, name: str, parent: str):
        self.kind = kind
        self.name = name
        self.parent = parent
        super().__init__(f"No {kind} named {name!r} in {parent!r}")
