from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import Iterable, Mapping

from .names import ClassName

logger = logging.getLogger(__name__)

IMPLICIT_PACKAGE = "java.lang"


@dataclass(frozen=True)
class Context:
    """
    Formatting state of one emission pass at one lexical scope.

    ``visible`` maps simple names to the class they denote in this scope.
    A context is never modified; nested scopes get a new one from
    ``create_subcontext``.
    """
    package_name: str = ""
    visible: Mapping[str, ClassName] = field(default_factory=lambda: MappingProxyType({}))
    depth: int = 0
    indent: str = "  "

    @classmethod
    def top_level(
        cls,
        package_name: str = "",
        imports: Iterable[ClassName] = (),
        indent: str = "  ",
    ) -> Context:
        visible: dict[str, ClassName] = {}
        for imported in imports:
            bound = visible.setdefault(imported.simple_name, imported)
            if bound != imported:
                raise ValueError(
                    f"Conflicting imports for {imported.simple_name}: {bound} and {imported}"
                )
        return cls(package_name, MappingProxyType(visible), 0, indent)

    def create_subcontext(self, names: Iterable[ClassName] = ()) -> Context:
        visible = dict(self.visible)
        # Inner declarations shadow outer ones.
        for name in names:
            visible[name.simple_name] = name
        logger.debug("Entering scope at depth %d with %d visible names", self.depth + 1, len(visible))
        return replace(self, visible=MappingProxyType(visible), depth=self.depth + 1)

    def resolves_to_simple_name(self, class_name: ClassName) -> bool:
        bound = self.visible.get(class_name.simple_name)
        if bound is not None:
            return bound == class_name
        if class_name.enclosing_simple_names:
            return False
        return class_name.package_name in (IMPLICIT_PACKAGE, self.package_name)

    def source_reference(self, class_name: ClassName) -> str:
        """Shortest text that unambiguously names ``class_name`` here."""
        if self.resolves_to_simple_name(class_name):
            return class_name.simple_name
        top = class_name.top_level_class_name()
        if top != class_name and self.resolves_to_simple_name(top):
            return ".".join((*class_name.enclosing_simple_names, class_name.simple_name))
        return class_name.canonical_name
