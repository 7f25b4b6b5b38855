"""
Demonstration driver: builds a few expressions, differentiates and simplifies
them in both orders, and prints every intermediate tree.
"""

import argparse
from typing import List, Optional

from .expression_tree import Expression, SymPyVerifier, constant, variable, add, multiply
from .logging_system import LogLevel, SymbolicCalculusLogger, configure_logging


def _describe(label: str, expr: Expression, verifier: Optional[SymPyVerifier] = None) -> str:
  line = f"{label} = {expr.render()}"
  if verifier is not None:
    line += f"    [{verifier.latex_representation(expr)}]"
  return line


def run_demo(point: float = 5.0, show_latex: bool = False,
             logger: Optional[SymbolicCalculusLogger] = None) -> List[str]:
  """Run the reference scenarios and return the printed lines.

  Nothing is logged unless a logger is passed in.
  """
  verifier = SymPyVerifier() if show_latex else None
  lines = []

  # f(x) = x + 2x
  f = add(variable(), multiply(constant(2), variable()))

  lines.append("--- Pattern 1: differentiate (x + 2x), then simplify ---")
  lines.append(_describe("f(x)", f, verifier))
  df = f.derivative()
  lines.append(_describe("f'(x) (derivative)", df, verifier))
  df_simplified = df.simplify()
  lines.append(_describe("f'(x) (simplified)", df_simplified, verifier))

  lines.append("")
  lines.append("--- Pattern 2: simplify (x + 2x) first, then differentiate ---")
  lines.append(_describe("f(x)", f, verifier))
  f_simplified = f.simplify()
  lines.append(_describe("f(x) (simplified)", f_simplified, verifier))
  df_pre_simplified = f_simplified.derivative()
  lines.append(_describe("f'(x) (derivative)", df_pre_simplified, verifier))
  df_final = df_pre_simplified.simplify()
  lines.append(_describe("f'(x) (final)", df_final, verifier))

  if logger is not None and df_simplified.render() != df_final.render():
    logger.warning(
      f"Simplify/derivative orders disagree: {df_simplified.render()} vs {df_final.render()}"
    )

  lines.append("")
  lines.append("--- Another example (g(x) = x*x) ---")
  g = multiply(variable(), variable())
  lines.append(_describe("g(x)", g, verifier))
  dg = g.derivative()
  lines.append(_describe("g'(x) (derivative)", dg, verifier))
  dg_simplified = dg.simplify()
  lines.append(_describe("g'(x) (simplified)", dg_simplified, verifier))
  value = dg_simplified.evaluate(point)
  lines.append(f"g'(x) at x={point:g} (evaluated): {value:g}")

  if logger is not None:
    logger.result_summary({
      "f'(x) derivative first": df_simplified.render(),
      "f'(x) simplified first": df_final.render(),
      f"g'({point:g})": value,
    })
  return lines


def main(argv: Optional[List[str]] = None) -> int:
  parser = argparse.ArgumentParser(description="Symbolic differentiation and simplification demo")
  parser.add_argument("--point", type=float, default=5.0, help="Point at which g'(x) is evaluated")
  parser.add_argument(
    "--log-level",
    default="silent",
    choices=[level.name.lower() for level in LogLevel],
    help="Logging verbosity"
  )
  parser.add_argument("--log-file", default=None, help="Also write log messages to this file")
  parser.add_argument("--latex", action="store_true", help="Print LaTeX forms alongside each tree")
  args = parser.parse_args(argv)

  logger = configure_logging(
    log_level=LogLevel[args.log_level.upper()],
    log_to_file=args.log_file is not None,
    log_file_path=args.log_file
  )

  for line in run_demo(point=args.point, show_latex=args.latex, logger=logger):
    print(line)
  return 0


if __name__ == "__main__":
  raise SystemExit(main())
