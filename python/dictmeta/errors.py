"""Exceptions raised while resolving, reading or writing dictionary metadata.

ValidationError covers a single attribute whose value cannot be coerced.
ResolutionError covers problems across the whole attribute set.
LoadError covers problems in the property file itself.
"""

from typing import Any, Iterable, Optional


class MetadataError(Exception):
    """
    Base exception for all dictionary metadata failures.
    """

    pass


class ValidationError(MetadataError, ValueError):
    """
    Raised when one attribute value cannot be converted to its typed form.
    """

    reason = "invalid value"

    def __init__(self, attribute: Any, value: Optional[str], detail: str = ""):
        self.attribute = attribute
        self.value = value
        name = getattr(attribute, "property_name", str(attribute))
        message = f"Attribute {name} has {self.reason}: {value!r}"
        if detail:
            message = f"{message} ({detail})"
        super().__init__(message)


class InvalidBooleanError(ValidationError):
    reason = "an invalid boolean value"


class InvalidSeparatorError(ValidationError):
    reason = "an invalid separator (must be a single character)"


class UnknownEncodingError(ValidationError):
    reason = "an unknown encoding"


class UnknownCultureError(ValidationError):
    reason = "an unknown locale"


class UnknownEncoderTypeError(ValidationError):
    reason = "an unknown encoder type"


class MalformedConversionPairError(ValidationError):
    reason = "a malformed conversion pair"


class MalformedReplacementPairError(ValidationError):
    reason = "a malformed replacement pair"


class InvalidEquivalenceCharError(ValidationError):
    reason = "an invalid equivalent character pair"


class ResolutionError(MetadataError, ValueError):
    """
    Raised when the attribute set as a whole is inconsistent.
    """

    pass


class MissingRequiredAttributesError(ResolutionError):
    """Some required attributes were neither supplied nor defaulted."""

    def __init__(self, missing: Iterable[Any]):
        self.missing = frozenset(missing)
        names = sorted(getattr(a, "property_name", str(a)) for a in self.missing)
        super().__init__(
            "At least one of the required attributes was not provided: "
            + ", ".join(names)
        )


class SeparatorNotSingleByteError(ResolutionError):
    """The separator does not encode to exactly one byte."""

    def __init__(self, separator: str, encoding: str):
        self.separator = separator
        self.encoding = encoding
        super().__init__(
            f"Separator character is not a single byte in encoding {encoding}: "
            f"{separator!r}"
        )


class UnroutedAttributeError(ResolutionError):
    """An attribute has no routing rule. This is a programming error."""

    def __init__(self, attribute: Any):
        self.attribute = attribute
        super().__init__(
            f"Unexpected code path (attribute should be handled but is not): {attribute}"
        )


class LoadError(MetadataError):
    """
    Raised when a metadata property file cannot be turned into attributes.
    """

    pass


class MissingEncoderAttributeError(LoadError):
    """No encoder key and no legacy keys to migrate from."""

    def __init__(self, property_name: str, inferred: str):
        self.property_name = property_name
        self.inferred = inferred
        super().__init__(
            f"Use an explicit {property_name}={inferred} metadata key"
        )


class DeprecatedEncoderKeysError(LoadError):
    """Only legacy uses-* keys specify the encoder."""

    def __init__(self, property_name: str, inferred: str):
        self.property_name = property_name
        self.inferred = inferred
        super().__init__(
            f"Deprecated encoder keys in metadata. Use {property_name}={inferred}"
        )


class UnknownAttributeNameError(LoadError, KeyError):
    """A property name does not belong to any known attribute."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"No attribute for property: {name}")

    def __str__(self) -> str:
        return self.args[0]
