"""Record dataclasses for extracted units, methods and endpoints."""

from dataclasses import dataclass, field
from typing import Optional


# Package assigned to units without a package declaration
DEFAULT_PACKAGE = "default"


@dataclass
class Annotation:
    """A raw annotation token attached to a declaration."""
    name: str                       # As written, e.g. "GET" or "javax.ws.rs.Path"
    arguments: Optional[str] = None # Text inside the parentheses, if any

    @property
    def text(self) -> str:
        """Annotation as it appears in source, e.g. '@Path("/users")'."""
        if self.arguments is None:
            return f"@{self.name}"
        return f"@{self.name}({self.arguments})"

    @property
    def simple_name(self) -> str:
        return self.name.rsplit(".", 1)[-1]


@dataclass
class Method:
    """A method-like declaration found in a unit's text."""
    name: str
    signature: str                  # Simplified one-line signature
    javadoc: str = ""               # Interior of the attached /** */ block
    annotations: list[Annotation] = field(default_factory=list)
    summary: str = ""               # One-line summary (filled by the summarizer)


@dataclass
class SourceUnit:
    """Structural record for one source file."""
    name: str                       # File name minus extension
    package: str                    # Declared package or DEFAULT_PACKAGE
    file: str                       # Path the unit was read from
    superclass: Optional[str] = None   # Simple or qualified; rewritten by the resolver
    interfaces: list[str] = field(default_factory=list)
    methods: list[Method] = field(default_factory=list)
    is_interface: bool = False
    is_abstract: bool = False
    is_rest_resource: bool = False
    subclasses: list[str] = field(default_factory=list)  # Qualified names, resolver only

    @property
    def qualified_name(self) -> str:
        return make_qualified_name(self.package, self.name)


@dataclass
class Endpoint:
    """A REST operation derived from annotations on a method."""
    http_method: str                # GET | POST | PUT | DELETE
    path: str
    method_name: str
    class_name: str
    package: str
    consumes: Optional[str] = None
    produces: Optional[str] = None

    @property
    def qualified_class(self) -> str:
        return make_qualified_name(self.package, self.class_name)


@dataclass
class ScanResult:
    """Unit-level facts recovered by the source scanner."""
    package: str = DEFAULT_PACKAGE
    superclass: Optional[str] = None
    interfaces: list[str] = field(default_factory=list)
    is_interface: bool = False
    is_abstract: bool = False
    is_rest_resource: bool = False


@dataclass
class FileExtraction:
    """Everything extracted from a single file, before merging."""
    unit: SourceUnit
    endpoints: list[Endpoint] = field(default_factory=list)
    enums: dict[str, list[str]] = field(default_factory=dict)


def make_qualified_name(package: str, name: str) -> str:
    """Join package and simple name.

    Example: make_qualified_name("com.acme", "User") -> "com.acme.User"
    """
    return f"{package}.{name}"


def simplify_class_name(name: str) -> str:
    """Strip the package from a qualified name.

    Example: com.acme.User -> User
    """
    return name.rsplit(".", 1)[-1]
