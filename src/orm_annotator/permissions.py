"""Allow-list gate for modules and classes."""

from __future__ import annotations

from orm_annotator.config import AnnotatorConfig
from orm_annotator.manifest import ClassDescriptor


class PermissionChecker:
    """Answers whether a module or class may have its docblock generated."""

    def __init__(self, config: AnnotatorConfig, descriptors: list[ClassDescriptor]):
        self.config = config
        self._modules = {d.name: d.module for d in descriptors}

    def module_is_allowed(self, module: str) -> bool:
        return module in self.config.enabled_modules

    def class_is_allowed(self, class_name: str) -> bool:
        if class_name in self.config.disabled_classes:
            return False
        module = self._modules.get(class_name)
        if module is None:
            return False
        return self.module_is_allowed(module)
