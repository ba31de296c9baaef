from __future__ import annotations

import logging
import sys
import traceback
from typing import Callable, Iterable, List, Optional, TextIO

from .evaluator import exec_stmt
from .tree import Stmt, pretty
from .types import Environment, LoxRuntimeError
from .utils import debug_py_trace_enabled

logger = logging.getLogger(__name__)
logging.getLogger("lox_ref").addHandler(logging.NullHandler())

Reporter = Callable[[LoxRuntimeError], None]

def report_runtime_error(error: LoxRuntimeError, stream: Optional[TextIO]=None) -> None:
    """Default diagnostics sink: message, then `[line N]`, on stderr."""
    dest = stream if stream is not None else sys.stderr
    dest.write(f"{error.message}\n[line {error.token.line}]\n")

    if debug_py_trace_enabled():
        dest.write("".join(traceback.format_exception(type(error), error, error.__traceback__)))

class Interpreter:
    """Executes top-level statements against one global scope owned by this instance."""

    def __init__(self, out: Optional[TextIO]=None, reporter: Optional[Reporter]=None):
        self.out: TextIO = out if out is not None else sys.stdout
        self.reporter: Reporter = reporter if reporter is not None else report_runtime_error
        self.globals = Environment()
        self.had_runtime_error = False

    def interpret(self, statements: Iterable[Stmt]) -> bool:
        """Run statements in order; stop at and report the first runtime error.

        Returns True when every statement ran.
        """
        stmts: List[Stmt] = list(statements)
        logger.debug("running %d statement(s)", len(stmts))

        try:
            for stmt in stmts:
                if logger.isEnabledFor(logging.DEBUG):
                    logger.debug("exec %s", pretty(stmt))
                exec_stmt(stmt, self.globals, self.out)
        except LoxRuntimeError as err:
            logger.debug("run aborted at line %d: %s", err.token.line, err.message)
            self.had_runtime_error = True
            self.reporter(err)
            return False

        return True

    def reset(self) -> None:
        self.globals = Environment()
        self.had_runtime_error = False

def run(statements: Iterable[Stmt], out: Optional[TextIO]=None, reporter: Optional[Reporter]=None) -> bool:
    return Interpreter(out=out, reporter=reporter).interpret(statements)
