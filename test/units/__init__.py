from __future__ import annotations

import importlib
import inspect

from .. import alphabase, TestBase, NameUnknownException
from alphabase.units import LogLevel, Unit

__all__ = ['alphabase', 'TestUnitBase', 'NameUnknownException']


class TestUnitBase(TestBase):

    @staticmethod
    def _relative_module_path(path: str, strip_test=True):
        path = path.split('.')
        path = path[1:]
        if strip_test:
            path = [x[4:].lstrip('_-.') if x.startswith('test') else x for x in path]
        return '.'.join(path)

    @classmethod
    def unit(cls) -> type[Unit]:
        name = cls._relative_module_path(cls.__module__)
        try:
            module = importlib.import_module(F'alphabase.{name}')
        except ImportError:
            pass
        else:
            for object in vars(module).values():
                if (
                    isinstance(object, type)
                    and issubclass(object, Unit)
                    and not inspect.isabstract(object)
                    and object.__module__ == module.__name__
                ):
                    return object
        try:
            basename = name.rsplit('.', 1)[-1]
            return getattr(alphabase, basename)
        except AttributeError:
            raise NameUnknownException(name)

    @classmethod
    def load(cls, *args, **kwargs) -> Unit:
        unit = cls.unit()(*args, **kwargs)
        unit.log_level = LogLevel.DETACHED
        return unit
