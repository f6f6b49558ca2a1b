#!/usr/bin/env python3
"""
Demo: run the lesson's example functions and plot the grouped histogram.

Without arguments the built-in life expectancy table is plotted. With
--url and --cache the CSV is downloaded once and plotted instead.
"""

import argparse
import logging

from fnlessons.arithmetic import power, power_report, average
from fnlessons.backends import render_grouped_histogram, save_histogram
from fnlessons.datasets import load_table
from fnlessons.examples import build_example_life_expectancy_table, example_numbers
from fnlessons.serialization import power_result_to_yaml, histogram_to_yaml


def main():
    parser = argparse.ArgumentParser(description="Run the functions lesson examples")
    parser.add_argument("--url", help="CSV to download (optional)")
    parser.add_argument("--cache", default="data/dataset.csv", help="Local path for the downloaded CSV")
    parser.add_argument("--value-column", default="lifeExp")
    parser.add_argument("--group-column", default="continent")
    parser.add_argument("--output", default="grouped_histogram.png")
    args = parser.parse_args()

    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    print("=" * 70)
    print("1. POWER")
    print("=" * 70)
    print(f"  power(3, 2)               = {power(3, 2, report_base=False)}")
    print(f"  power(2, 3)               = {power(2, 3, report_base=False)}")
    print(f"  power(exponent=2, base=3) = {power(exponent=2, base=3, report_base=False)}")
    print(f"  power(-8, 1/3)            = {power(-8, 1 / 3, report_base=False)}")
    print()
    print("  power_report(2, 10):")
    print("  " + power_result_to_yaml(power_report(2, 10, report_base=False)).replace("\n", "\n  "))

    print("=" * 70)
    print("2. AVERAGE")
    print("=" * 70)
    print(f"  average(0..100) = {average(example_numbers(100))}")
    print()

    print("=" * 70)
    print("3. GROUPED HISTOGRAM")
    print("=" * 70)
    if args.url:
        table = load_table(args.url, args.cache)
    else:
        table = build_example_life_expectancy_table()
    chart = render_grouped_histogram(table, args.value_column, args.group_column)
    save_histogram(chart, args.output)
    print(histogram_to_yaml(chart))
    print(f"✅ Histogram saved to {args.output}")


if __name__ == "__main__":
    main()
