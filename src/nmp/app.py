"""
NMP Application: the interactive Numeric Matrix Processor.

Reads operands from a Console, runs the engine, prints the result.
Engine errors and malformed input are reported and the menu continues.

Usage:
    from nmp.app import Application
    Application(verbose=True).run()
"""

import time

from nmp.console import Console
from nmp.errors import MatrixError
from nmp.menu import Menu
from nmp.transposition import Transposition


class Application:
    """
    Menu-driven front end over the matrix engine.

    Parameters
    ----------
    stdin, stdout : text streams, optional
        Defaults to the process streams.
    verbose : bool
        Print operand shapes and timing for each operation.
    """

    def __init__(self, stdin=None, stdout=None, verbose=False):
        self.console = Console(stdin, stdout)
        self.verbose = verbose

    def build_menu(self):
        transpose_menu = Menu("Transpose Matrix").one_time()
        for mode in Transposition:
            transpose_menu.add(mode.label, lambda mode=mode: self.transpose(mode))

        return (Menu("Numeric Matrix Processor")
                .add("Add matrices", self.add_matrices)
                .add("Multiply matrix to a constant", self.multiply_by_constant)
                .add("Multiply matrices", self.multiply_matrices)
                .add("Transpose matrix", transpose_menu)
                .add("Calculate a determinant", self.calculate_determinant)
                .add("Inverse matrix", self.inverse_matrix))

    def run(self):
        try:
            self.build_menu().run(self.console)
        except EOFError:
            pass

    # ------------------------------------------------------------
    # Actions
    # ------------------------------------------------------------

    def add_matrices(self):
        self._guarded(self._add_matrices)

    def multiply_by_constant(self):
        self._guarded(self._multiply_by_constant)

    def multiply_matrices(self):
        self._guarded(self._multiply_matrices)

    def transpose(self, mode):
        self._guarded(lambda: self._transpose(mode))

    def calculate_determinant(self):
        self._guarded(self._calculate_determinant)

    def inverse_matrix(self):
        self._guarded(self._inverse_matrix)

    def _add_matrices(self):
        first = self.console.read_matrix("first")
        second = self.console.read_matrix("second")
        self._report("add", first, second, lambda: first.add(second))

    def _multiply_by_constant(self):
        matrix = self.console.read_matrix("the")
        self.console.write("Enter constant:")
        constant = self.console.read_float()
        self._report("scale", matrix, None, lambda: matrix.scalar_multiply(constant))

    def _multiply_matrices(self):
        first = self.console.read_matrix("first")
        second = self.console.read_matrix("second")
        self._report("multiply", first, second, lambda: first.multiply(second))

    def _transpose(self, mode):
        matrix = self.console.read_matrix("the")
        self._report(f"transpose/{mode.value}", matrix, None, lambda: matrix.transpose(mode))

    def _calculate_determinant(self):
        matrix = self.console.read_matrix("the")
        self._report("determinant", matrix, None, matrix.determinant)

    def _inverse_matrix(self):
        matrix = self.console.read_matrix("the")
        result = self._timed("inverse", matrix, None, matrix.inverse)
        if result is None:
            self.console.write("This matrix doesn't have an inverse.")
            return
        self.console.print_result(result)

    # ------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------

    def _guarded(self, action):
        try:
            action()
        except MatrixError as exc:
            self.console.write("The operation cannot be performed.")
            self.console.write(f"  {exc}")
        except ValueError as exc:
            self.console.write(f"Invalid input: {exc}")
            self.console.discard_pending()

    def _report(self, name, first, second, operation):
        self.console.print_result(self._timed(name, first, second, operation))

    def _timed(self, name, first, second, operation):
        t0 = time.time()
        result = operation()
        if self.verbose:
            shapes = f"{first.rows} x {first.cols}"
            if second is not None:
                shapes += f", {second.rows} x {second.cols}"
            self.console.write(
                f"  [NMP] {name}: {shapes}, {(time.time() - t0) * 1e3:.2f} ms")
        return result
