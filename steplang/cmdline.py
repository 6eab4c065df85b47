"""
This runs the steplang demonstration programs.

{0}

For example:

    steplang fibonacci

will type-check and run the recursive-function demo, while

    steplang --list

shows what demos there are, and

    steplang -h

will explain all the arguments.
"""
import sys, argparse

parser = argparse.ArgumentParser(
	prog="steplang",
	description="Run a steplang demonstration program.",
)
parser.add_argument("program", nargs="?", help="which demo to run; try 'fibonacci' for example.")
parser.add_argument('-l', "--list", action="store_true", help="List the demo programs and stop.")
parser.add_argument('-c', "--check", action="store_true", help="Type-check the program but do not actually execute it.")
parser.add_argument('-n', "--no-check", action="store_true", help="Skip the type-checker and just run the program.")
parser.add_argument('-p', "--path", help="File the file-oriented demos should read or write.")
parser.add_argument('-s', "--show", action="append", default=[], metavar="NAME", help="After running, show the final value of this variable. May repeat.")
parser.add_argument('-v', "--verbose", action="count", help="Say what's going on along the way.")

def run(args):
	from .demos import DEMOS, DEFAULT_PATH
	from .diagnostics import Report, TooManyIssues
	from .environment import Environment
	from .errors import Trouble
	if args.list:
		for name, builder in DEMOS.items():
			print("%-14s %s" % (name, builder.__doc__.strip()))
		return 0
	if args.program not in DEMOS:
		print("There is no demo called %r. Try --list." % args.program, file=sys.stderr)
		return 1
	report = Report(verbose=args.verbose)
	program = DEMOS[args.program](args.path or DEFAULT_PATH)
	if not args.no_check:
		from .static.check import check_stmt
		report.info("Type-Check", args.program)
		try: check_stmt(program, Environment(), report)
		except TooManyIssues:
			report.complain_to_console()
			print("Giving up after a few issues. One crisis at a time, eh?", file=sys.stderr)
			return 1
		if report.sick():
			report.complain_to_console()
			return 1
	if args.check:
		print("Looks plausible to me.", file=sys.stderr)
		return 0
	from .tree_walker.executive import run_program
	from .tree_walker.values import Continue
	report.info("Execute", args.program)
	try: outcome = run_program(program)
	except Trouble as ex:
		report.runtime_failure(ex)
		report.complain_to_console()
		return 1
	if not isinstance(outcome, Continue):
		print("The program returned", _show(outcome.value))
		return 0
	for name in args.show:
		value = outcome.env.find_anywhere(name)
		print("%s = %s" % (name, "(not defined)" if value is None else _show(value)))
	return 0

def _show(value):
	from .syntax import Constant
	from .tree_walker.values import render
	return render(value) if isinstance(value, Constant) else "<function %s>" % value.name

def main():
	if len(sys.argv) > 1:
		sys.exit(run(parser.parse_args()))
	else:
		print(__doc__.strip().format(parser.format_usage()))
