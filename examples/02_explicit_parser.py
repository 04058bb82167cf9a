"""Accumulators can also be attached to a parser we construct ourselves, or to one of
its argument groups.

Usage:
`python ./02_explicit_parser.py --help`
`python ./02_explicit_parser.py build -q -q --define DEBUG --define ARCH=x86`
"""

import argparse

import multiflag

if __name__ == "__main__":
    parser = argparse.ArgumentParser(formatter_class=multiflag.HelpFormatter)
    parser.add_argument("target")

    quiet = multiflag.counting("quiet", "false", "Less output", "q", registrar=parser)

    group = parser.add_argument_group("preprocessor")
    defines = multiflag.collecting(
        "define", "none", "Define a macro", "D", registrar=group
    )

    args = parser.parse_args()
    print("Target:", args.target)
    print("Quiet:", quiet.occurrence_count())
    for item in defines.values():
        print("Define:", item)
