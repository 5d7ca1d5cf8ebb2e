"""主程序入口 - 命令行计算LaTeX风格公式"""
import argparse
import logging
import sys

import numpy as np

from config.config import *
from core import Formula, CalcError
from utils import format_value, to_frame

# 设置日志
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


def run_sweep(formula, start, stop, num_points, output_path=None, precision=None):
    """在[start, stop]上等距取num_points个变量值求值"""
    values = np.linspace(start, stop, int(num_points))
    logger.info(f"Sweeping {formula.variable_name} over [{start}, {stop}] with {len(values)} points")

    results = formula.evaluate_many(values)
    table = to_frame(results)

    if output_path:
        logger.info(f"Saving sweep to {output_path}")
        table.to_csv(output_path, float_format=SWEEP_CONFIG['float_format'])
    else:
        for value, result in results.items():
            print(f"{value:g}\t{format_value(result, precision)}")
    return table


def main(args):
    logging.getLogger().setLevel(args.log_level)
    validate_config()

    strict = not args.lenient
    try:
        formula = Formula(args.expression, strict=strict)
        logger.debug(f"Normalized: {formula.compilation.infix}")

        if args.sweep:
            run_sweep(formula, args.start, args.stop, args.num_points, args.output_path, args.precision)
        else:
            result = formula.evaluate(args.variable)
            print(format_value(result, args.precision))
    except CalcError as e:
        logger.error(f"Error evaluating formula '{args.expression[:50]}': {e}")
        return 1
    return 0


def build_parser():
    parser = argparse.ArgumentParser(description="LaTeX formula calculator")

    parser.add_argument(
        "--expression",
        type=str,
        required=True,
        help="Formula in LaTeX-like syntax, e.g. '\\frac{1}{2}x' or 'e^{i*pi}'"
    )
    parser.add_argument(
        "--variable",
        type=float,
        default=None,
        help="Value substituted for the free variable"
    )
    parser.add_argument(
        "--sweep",
        action="store_true",
        help="Evaluate over num_points evenly spaced variable values in [start, stop]"
    )
    parser.add_argument(
        "--start",
        type=float,
        default=SWEEP_CONFIG['default_start'],
        help="First variable value of the sweep"
    )
    parser.add_argument(
        "--stop",
        type=float,
        default=SWEEP_CONFIG['default_stop'],
        help="Last variable value of the sweep"
    )
    parser.add_argument(
        "--num_points",
        type=int,
        default=SWEEP_CONFIG['default_num_points'],
        help="Number of sweep points"
    )
    parser.add_argument(
        "--output_path",
        type=str,
        default=None,
        help="Save the sweep as CSV instead of printing it"
    )
    parser.add_argument(
        "--precision",
        type=int,
        default=DISPLAY_CONFIG['precision'],
        help="Significant digits in printed results"
    )
    parser.add_argument(
        "--lenient",
        action="store_true",
        help="Evaluate malformed formulas anyway instead of reporting a parse error"
    )
    parser.add_argument(
        "--log_level",
        type=str,
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level"
    )
    return parser


if __name__ == "__main__":
    sys.exit(main(build_parser().parse_args()))
