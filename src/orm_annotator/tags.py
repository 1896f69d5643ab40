"""Render a class's ORM schema as docblock tag lines.

Every line carries the " * " comment-continuation prefix so the string
can be embedded verbatim between the block markers.
"""

from __future__ import annotations

from typing import Callable

from orm_annotator.manifest import ClassDescriptor

TagProvider = Callable[[ClassDescriptor], str]

# ORM field type -> PHP scalar type
FIELD_TYPES: dict[str, str] = {
    "Boolean": "boolean",
    "Currency": "float",
    "Decimal": "float",
    "Double": "float",
    "Float": "float",
    "ForeignKey": "int",
    "Int": "int",
    "Percentage": "float",
}


def php_type(field_type: str) -> str:
    """Map an ORM field spec like 'Varchar(255)' to a PHP type."""
    base = field_type.split("(", 1)[0].strip()
    return FIELD_TYPES.get(base, "string")


class DocBlockTagGenerator:
    """Builds @property, @method and @mixin tags for one class."""

    def __init__(self, descriptor: ClassDescriptor):
        self.descriptor = descriptor

    def property_tags(self) -> list[str]:
        d = self.descriptor
        tags = [f"@property {php_type(t)} ${name}" for name, t in d.db.items()]
        if d.is_extension and d.owners:
            owner_types = "|".join([*d.owners, d.name])
            tags.append(f"@property {owner_types} $owner")
        return tags

    def has_one_tags(self) -> list[str]:
        tags = []
        for name, target in self.descriptor.has_one.items():
            tags.append(f"@property int ${name}ID")
            tags.append(f"@method {target} {name}()")
        return tags

    def has_many_tags(self) -> list[str]:
        return [
            f"@method DataList|{target}[] {name}()"
            for name, target in self.descriptor.has_many.items()
        ]

    def many_many_tags(self) -> list[str]:
        relations = [
            *self.descriptor.many_many.items(),
            *self.descriptor.belongs_many_many.items(),
        ]
        return [
            f"@method ManyManyList|{target}[] {name}()"
            for name, target in relations
        ]

    def mixin_tags(self) -> list[str]:
        if self.descriptor.is_extension:
            return []
        return [f"@mixin {ext}" for ext in self.descriptor.extensions]

    def tags_as_string(self) -> str:
        """All tag groups, blank comment line between groups, or ""."""
        groups = [
            self.property_tags(),
            self.has_one_tags(),
            self.has_many_tags(),
            self.many_many_tags(),
            self.mixin_tags(),
        ]
        rendered = [
            "".join(f" * {tag}\n" for tag in group)
            for group in groups if group
        ]
        return " * \n".join(rendered)


def generate_tags(descriptor: ClassDescriptor) -> str:
    """Default tag provider."""
    return DocBlockTagGenerator(descriptor).tags_as_string()
