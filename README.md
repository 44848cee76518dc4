# labtasks

This package has two small calculators that read text files. Each one also has
a generator for random input files and a self-check command that writes a
report.

* **Identifiers** (`labtasks.identifiers`): this finds the average length of the
  identifiers in a file. An identifier is an ASCII letter followed by any number
  of ASCII letters or digits. Every other byte separates identifiers.
* **Polynomial** (`labtasks.polynomial`): this finds the value of a polynomial's
  derivative at a point `x`. The file lists the coefficients from the highest
  power down to the constant term, separated by whitespace. Reading stops at the
  first text that is not a number.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Library use

```python
from labtasks.identifiers import average_identifier_length, NoIdentifiersError
from labtasks.polynomial import polynomial_derivative, EmptyPolynomialError

average_identifier_length("words.txt")      # 5.333... for "test123 abc def456"
polynomial_derivative("coeffs.txt", 2.0)    # 6.0 for "1.0 2.0 1.0"
```

If a file cannot be read, both functions raise `OSError`. They also raise these
errors:

* `average_identifier_length` raises `NoIdentifiersError` when the file has no
  identifier.
* `polynomial_derivative` raises `EmptyPolynomialError` when the file has no
  coefficient.

Both error classes are subclasses of `ValueError`.

Two functions write random input files:

* `generate_identifier_file(path, count, max_length, rng=None)` writes `count`
  identifiers. Each one is 1 to `max_length` characters long, starts with a
  letter and is followed by a space. It raises `ValueError` if `max_length` is
  below 1.
* `generate_polynomial_file(path, degree, min_coeff, max_coeff, rng=None)` writes
  `degree + 1` coefficients, taken uniformly from `[min_coeff, max_coeff]` and
  separated by spaces.

To get the same file on every run, pass a `random.Random` instance as `rng`.

### Check runner

`labtasks.runner.SuiteRunner(output_file, append=False)` opens a report file and
writes a dated header to it. If `append` is true it adds to the end of the file;
otherwise it overwrites the file. It can be used as a context manager.

* `run_test(name, func)` records whether `func()` returned a true value.
* `run_test_with_time(name, func)` records the same and also how long `func()`
  took.
* `write_results()` writes every result and the totals to the report.

Each of these run methods returns a `CheckResult`, which has the fields `name`,
`success`, `message` and `execution_time`.

## Commands

```
labtasks-generate
```

This is an interactive generator. It asks for:

1. the kind of file (1 for identifiers, 2 for polynomial coefficients);
2. the path to save it to;
3. the parameters for that kind of file.

```
labtasks-check-identifiers [REPORT]
labtasks-check-polynomial [REPORT]
```

Each of these commands runs its built-in checks in a temporary directory. It
then asks for a file and runs one more check on it. The polynomial command also
asks for the point `x`. The result of that last check is printed to the console.

The report goes to one of two places:

* If `REPORT` is given, the report is appended to that file.
* If it is not given, the command asks for a file name and overwrites that file.

The report lists each check and whether it passed. For timed checks it also
gives the time taken. At the end it gives the totals and the percentage of
checks that passed. If the report file cannot be opened, the command exits with
status 1.

The prompts and the report are in Russian.