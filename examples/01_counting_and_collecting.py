"""Counting flags tally repeated use, while collecting flags record one argument per
use. Both are registered with a process-wide parser, which `multiflag.parse()` reads.

Usage:
`python ./01_counting_and_collecting.py --help`
`python ./01_counting_and_collecting.py -v -v -v -v -t parse -t compile`
`python ./01_counting_and_collecting.py -v -verbose --verbose -trace parse`
"""

import multiflag

# Argument-free. Repeat as necessary.
verbosity = multiflag.counting(
    "verbose", "false", "Verbosity. Repeat as necessary", "v"
)

# Each use consumes one argument.
trace = multiflag.collecting("trace", "none", "Trace program sections", "t")

if __name__ == "__main__":
    multiflag.parse()

    print("Verbosity:", verbosity.occurrence_count())
    for item in trace.values():
        print("Tracing:", item)
