"""
fnlessons: Teaching-Example Function Library

The example functions of a lesson on writing functions, packaged so each
one can be called, tested and plotted on its own.

CONTENTS:
---------
    arithmetic          power, power_report, average
    table / csv_parser  in-memory datasets with typed column access
    backends.histogram  grouped histogram renderer (matplotlib)
    datasets            fetch-once CSV download into a Table
    scripts             load functions from an external script file

The three example functions are independent of each other.
None of them keeps state between calls.
"""

__version__ = "0.1.0"
