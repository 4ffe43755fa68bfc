import argparse
import logging
import sys

from ListMatrix import element_format
from MatrixData import load_matrix_file, default_matrices
from MatrixErrors import DimensionMismatch, IngestionError
from LoggingConfig import setup_logging, get_logger

logger = get_logger("UI")


class Manager:
    # Manager class - runs the text menu over a pair of matrices
    # Input is read a token at a time, so several values can be typed on one line
    # Menu constants
    DISPLAY = 1
    ADD = 2
    MULTIPLY = 3
    DIAGONALS = 4
    SWAP_ROWS = 5
    SWAP_COLUMNS = 6
    UPDATE_ELEMENT = 7
    EXIT = 8

    MENU_LINES = ("\nMatrix Operations Menu:",
                  "1. Display matrices",
                  "2. Add matrices",
                  "3. Multiply matrices",
                  "4. Calculate diagonal sums",
                  "5. Swap rows",
                  "6. Swap columns",
                  "7. Update element",
                  "8. Exit")

    def __init__(self, matrix1, matrix2, input_func=input, output_func=print):
        self.__matrices = {1: matrix1, 2: matrix2}
        self.__input_func = input_func
        self.__output_func = output_func
        self.__pending_tokens = []

    @property
    def matrix1(self):
        return self.__matrices[1]

    @property
    def matrix2(self):
        return self.__matrices[2]

    def run(self):
        choice = None
        while choice != self.EXIT:
            for line in self.MENU_LINES:
                self.__output_func(line)
            try:
                choice = self.__read_int("Enter your choice: ")
                self.__handle_choice(choice)
            except ValueError:
                # Discard the rest of the line so the bad token is not read again
                self.__pending_tokens = []
                self.__output_func("Invalid input.")
            except EOFError:
                # End of input behaves like choosing exit
                logger.info("Input ended, closing session")
                self.__output_func("\nExiting program.")
                break

    def __handle_choice(self, choice):
        logger.info("Menu choice %d", choice)
        if choice == self.DISPLAY:
            self.__show_matrix("\nMatrix 1:", self.matrix1)
            self.__show_matrix("\nMatrix 2:", self.matrix2)
        elif choice == self.ADD:
            self.__arithmetic(self.matrix1.add, "\nMatrix 1 + Matrix 2:")
        elif choice == self.MULTIPLY:
            self.__arithmetic(self.matrix1.multiply, "\nMatrix 1 * Matrix 2:")
        elif choice == self.DIAGONALS:
            self.__show_diagonals(1)
            self.__show_diagonals(2)
        elif choice == self.SWAP_ROWS:
            matrix_num = self.__read_int("Which matrix (1 or 2)? ")
            row1, row2 = self.__read_ints("Enter the two row indices to swap (0-based): ", 2)
            self.__structural_change(matrix_num, lambda matrix: matrix.swap_rows(row1, row2),
                                     "Rows swapped successfully.", "Invalid row indices.")
        elif choice == self.SWAP_COLUMNS:
            matrix_num = self.__read_int("Which matrix (1 or 2)? ")
            col1, col2 = self.__read_ints("Enter the two column indices to swap (0-based): ", 2)
            self.__structural_change(matrix_num, lambda matrix: matrix.swap_columns(col1, col2),
                                     "Columns swapped successfully.", "Invalid column indices.")
        elif choice == self.UPDATE_ELEMENT:
            matrix_num = self.__read_int("Which matrix (1 or 2)? ")
            row, col = self.__read_ints("Enter row, column (0-based), and new value: ", 2)
            # Both matrices always share an element type
            value = self.matrix1.element_type(self.__next_token(""))
            self.__structural_change(matrix_num, lambda matrix: matrix.update_element(row, col, value),
                                     "Element updated successfully.", "Invalid indices.")
        elif choice == self.EXIT:
            self.__output_func("Exiting program.")
        else:
            self.__output_func("Invalid choice. Please try again.")

    def __arithmetic(self, operation, title):
        try:
            result = operation(self.matrix2)
        except DimensionMismatch as error:
            logger.warning("Arithmetic declined: %s", error)
            self.__output_func("Error: " + str(error))
        else:
            self.__show_matrix(title, result)

    def __show_diagonals(self, matrix_num):
        main_sum, anti_sum = self.__matrices[matrix_num].sum_diagonals()
        self.__output_func("\nMatrix %d Diagonals:" % matrix_num)
        self.__output_func("Main diagonal sum: " + self.__format_value(main_sum))
        self.__output_func("Secondary diagonal sum: " + self.__format_value(anti_sum))

    def __structural_change(self, matrix_num, change, success_text, failure_text):
        if matrix_num not in self.__matrices:
            self.__output_func("Invalid matrix choice.")
        elif change(self.__matrices[matrix_num]):
            self.__show_matrix(success_text + " New Matrix %d:" % matrix_num, self.__matrices[matrix_num])
        else:
            logger.warning("Operation declined on matrix %d: %s", matrix_num, failure_text)
            self.__output_func(failure_text)

    def __show_matrix(self, title, matrix):
        self.__output_func(title)
        for line in matrix.format().splitlines():
            self.__output_func(line)

    def __format_value(self, value):
        # Both matrices always share an element type
        return element_format(self.matrix1.element_type, padded=False) % value

    def __next_token(self, prompt):
        # Only the first token of a request shows the prompt, later ones come from the same line if possible
        while not self.__pending_tokens:
            self.__pending_tokens = self.__input_func(prompt).split()
        return self.__pending_tokens.pop(0)

    def __read_int(self, prompt):
        return int(self.__next_token(prompt))

    def __read_ints(self, prompt, count):
        values = [self.__read_int(prompt)]
        for _ in range(count - 1):
            values.append(self.__read_int(""))
        return values


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Interactive square matrix operations")
    parser.add_argument("--file", help="matrix file to load instead of asking")
    parser.add_argument("--log-level", default="WARNING",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"], help="logging level")
    parser.add_argument("--log-file", help="also write log records to this file")
    return parser.parse_args(argv)


def load_session_matrices(args, input_func, output_func):
    if args.file is not None:
        return load_matrix_file(args.file)
    choice = input_func("Do you want to load matrix data from a file? (y/n): ").strip()
    if choice[:1] in ("y", "Y"):
        filename = input_func("Enter the filename: ").strip()
        return load_matrix_file(filename)
    output_func("Using default matrix data (4x4 integer matrices)")
    return default_matrices()


def main(argv=None, input_func=input, output_func=print):
    args = parse_args(argv)
    setup_logging(getattr(logging, args.log_level), args.log_file)
    output_func("Matrix Operations Program\n")
    try:
        matrix1, matrix2 = load_session_matrices(args, input_func, output_func)
    except IngestionError as error:
        logger.error("Could not load matrices: %s", error)
        output_func("Error: " + str(error))
        return 1
    except EOFError:
        logger.error("Input ended before any matrices were loaded")
        return 1
    Manager(matrix1, matrix2, input_func, output_func).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
