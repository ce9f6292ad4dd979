"""AST based extraction of import dependencies."""
import ast
from pathlib import Path
from typing import Collection, List, Optional

import structlog

from onionarch.domain.dependency import Dependency, DependencyKind
from onionarch.domain.exceptions import SourceParseError
from onionarch.domain.ports import DependencyReaderPort

logger = structlog.get_logger(__name__)


class AstDependencyReader(DependencyReaderPort):
    """Reads ``import`` and ``from ... import`` statements of a module.

    Every import in the module is reported, including imports inside functions.
    Imports nested under ``if TYPE_CHECKING:`` are flagged as type-checking only.
    """

    def read(self, module: str, path: Path, known_modules: Collection[str]) -> List[Dependency]:
        try:
            source = Path(path).read_text(encoding="utf-8")
            tree = ast.parse(source, filename=str(path))
        except (SyntaxError, UnicodeDecodeError, ValueError) as e:
            raise SourceParseError(path, str(e)) from e
        except OSError as e:
            raise SourceParseError(path, e.strerror or str(e)) from e

        is_package = Path(path).name == "__init__.py"
        visitor = _ImportVisitor(module, is_package, known_modules)
        visitor.visit(tree)
        return visitor.dependencies


class _ImportVisitor(ast.NodeVisitor):
    def __init__(self, module: str, is_package: bool, known_modules: Collection[str]):
        self.module = module
        self.package = module if is_package else module.rpartition(".")[0]
        self.known_modules = known_modules
        self.dependencies: List[Dependency] = []
        self._type_checking_depth = 0

    def visit_If(self, node: ast.If) -> None:
        if _is_type_checking_guard(node.test):
            self._type_checking_depth += 1
            for child in node.body:
                self.visit(child)
            self._type_checking_depth -= 1
            for child in node.orelse:
                self.visit(child)
        else:
            self.generic_visit(node)

    def visit_Import(self, node: ast.Import) -> None:
        for alias in node.names:
            self._add(alias.name, node.lineno, DependencyKind.IMPORT)

    def visit_ImportFrom(self, node: ast.ImportFrom) -> None:
        base = self._resolve(node.module, node.level)
        if base is None:
            logger.debug("Skipping relative import above root", module=self.module, line=node.lineno)
            return
        for alias in node.names:
            candidate = f"{base}.{alias.name}" if base else alias.name
            if alias.name != "*" and candidate in self.known_modules:
                self._add(candidate, node.lineno, DependencyKind.IMPORT_FROM)
            elif base:
                self._add(base, node.lineno, DependencyKind.IMPORT_FROM)

    def _resolve(self, name: Optional[str], level: int) -> Optional[str]:
        if level == 0:
            return name
        parts = self.package.split(".") if self.package else []
        if level - 1 >= len(parts):
            return None
        parts = parts[: len(parts) - (level - 1)]
        if name:
            parts.append(name)
        return ".".join(parts)

    def _add(self, target: str, line: int, kind: DependencyKind) -> None:
        if target == self.module:
            return
        self.dependencies.append(
            Dependency(
                origin=self.module,
                target=target,
                line=line,
                kind=kind,
                type_checking=self._type_checking_depth > 0,
            )
        )


def _is_type_checking_guard(test: ast.expr) -> bool:
    if isinstance(test, ast.Name):
        return test.id == "TYPE_CHECKING"
    if isinstance(test, ast.Attribute):
        return test.attr == "TYPE_CHECKING"
    return False
