"""Pydantic models for function candidates, diagnostics and the catalog."""

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field


class TypeKind(str, Enum):
    """Shapes a written Rust type can take."""

    PRIMITIVE = "primitive"  # i32, f64, bool, ...
    PATH = "path"  # Foo, core::ffi::c_int
    POINTER = "pointer"  # *const T, *mut T
    REFERENCE = "reference"  # &T, &mut T
    ARRAY = "array"  # [T; N]
    SLICE = "slice"  # [T]
    TUPLE = "tuple"  # (A, B), ()
    OTHER = "other"  # fn pointers, impl Trait, receivers, ...


class TypeNode(BaseModel):
    """A raw parameter or return type, detached from the parse tree."""

    kind: TypeKind
    text: str  # e.g., "*mut f64"
    mutable: bool = False
    pointee: Optional["TypeNode"] = None
    segments: int = 1  # path segments, "core::f64" has 2

    def __str__(self) -> str:
        return self.text


class Qualifiers(BaseModel):
    """Function qualifiers written before `fn`."""

    is_const: bool = False
    is_async: bool = False
    is_unsafe: bool = False


class GenericCounts(BaseModel):
    """Number of generic parameters of each flavour."""

    type_params: int = 0
    lifetime_params: int = 0
    const_params: int = 0
    text: str = ""  # e.g., "<'a, T>"


class FunctionCandidate(BaseModel):
    """A public function declaration prior to validation."""

    ident: str
    linkage: Optional[str] = None  # "C" for extern "C", None for no string
    qualifiers: Qualifiers = Field(default_factory=Qualifiers)
    attrs: List[str] = Field(default_factory=list)  # e.g., ["#[inline]"]
    generics: GenericCounts = Field(default_factory=GenericCounts)
    variadic: Optional[str] = None  # rendered variadic parameter, e.g., "..."
    params: List[TypeNode] = Field(default_factory=list)
    ret: Optional[TypeNode] = None
    file: str = ""
    line: int = 0


class ErrorKind(str, Enum):
    """Rules a candidate can fail."""

    NOT_FOREIGN_ABI = "NotForeignAbi"
    IS_CONST = "IsConst"
    IS_ASYNC = "IsAsync"
    IS_UNSAFE = "IsUnsafe"
    HAS_VARIADIC = "HasVariadic"
    HAS_GENERIC_TYPE_PARAM = "HasGenericTypeParam"
    HAS_LIFETIME_PARAM = "HasLifetimeParam"
    HAS_CONST_PARAM = "HasConstParam"
    MISSING_INLINE_MARKER = "MissingInlineMarker"
    MISSING_NO_PANIC_MARKER = "MissingNoPanicMarker"
    UNSUPPORTED_RETURN_TYPE = "UnsupportedReturnType"
    UNSUPPORTED_ARG_TYPE = "UnsupportedArgType"


class ValidationError(BaseModel):
    """A single rule violation recorded for a candidate."""

    kind: ErrorKind
    identifier: str
    message: str

    def render(self) -> str:
        """Format as a diagnostic line."""
        return f'[error]: Function "{self.identifier}" {self.message}'


class ValidatedSignature(BaseModel):
    """A candidate that passed every rule."""

    ident: str
    api_kind: str  # e.g., "Cos"
    arg_tys: List[str] = Field(default_factory=list)
    ret_ty: Optional[str] = None


class CatalogRecord(BaseModel):
    """One entry handed to a generation target."""

    id: str
    api_kind: str
    arg_tys: List[str] = Field(default_factory=list)
    arg_ids: List[str] = Field(default_factory=list)
    ret_ty: Optional[str] = None


class Catalog(BaseModel):
    """Ordered validated signatures plus every recorded error."""

    source: str = ""
    signatures: List[ValidatedSignature] = Field(default_factory=list)
    errors: List[ValidationError] = Field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.errors

    @property
    def identifiers(self) -> List[str]:
        return [sig.ident for sig in self.signatures]

    def errors_for(self, ident: str) -> List[ValidationError]:
        """Return the errors recorded for one function."""
        return [e for e in self.errors if e.identifier == ident]
