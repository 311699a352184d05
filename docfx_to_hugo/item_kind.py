"""The closed set of DocFX item types and predicates over it."""

NAMESPACE = "Namespace"

ITEM_KINDS = (
    "Namespace",
    "Enum",
    "Field",
    "Method",
    "Class",
    "Struct",
    "Constructor",
    "Property",
    "Delegate",
    "Operator",
    "Interface",
)

PLURAL_ITEM_KINDS = {
    "Namespace": "Namespaces",
    "Enum": "Enums",
    "Field": "Fields",
    "Method": "Methods",
    "Class": "Classes",
    "Struct": "Structs",
    "Constructor": "Constructors",
    "Property": "Properties",
    "Delegate": "Delegates",
    "Operator": "Operators",
    "Interface": "Interfaces",
}

MEMBER_KINDS = frozenset({"Constructor", "Field", "Method", "Operator", "Property"})

# Kinds whose syntax return value is rendered as a "Return Type" section.
RETURNABLE_KINDS = frozenset({"Delegate", "Operator", "Method"})

# Kinds that get see-also entries for their parameter and return types.
VALUE_KINDS = frozenset({"Property", "Field"})


def is_namespace_kind(kind: str) -> bool:
    """Check if the kind represents a namespace."""
    return kind == NAMESPACE


def is_member_kind(kind: str) -> bool:
    """Check if the kind is a member that lives on its parent type's page tree."""
    return kind in MEMBER_KINDS


def is_type_kind(kind: str) -> bool:
    """Check if the kind represents a type (class, struct, enum, etc.)."""
    if kind not in ITEM_KINDS:
        return False
    return not is_namespace_kind(kind) and not is_member_kind(kind)
