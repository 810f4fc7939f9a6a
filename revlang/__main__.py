
import sys
import logging

from .frontend import FrontEnd
from .exception import TokenError, ScanError, ParseError, format_generic
from .util import Namespace

VERSION = "0.1.0"

def usage(program):
    sys.stdout.write("Usage:\n")
    sys.stdout.write("  %s [-v] [-V] [-h|--help] [-t|--tokens] [-o|--output PATH] [PATH]\n" % program)

def parse_args(argv):
    program, *argvalues = argv
    args = Namespace()
    args.verbose = 0
    args.positional = []
    args.output = None
    args.tokens = False

    opts1 = {
        "-o": ("output", str),
    }
    opts2 = {
        "--output": ("output", str),
    }

    while argvalues:
        arg = argvalues.pop(0)

        if arg == "-h" or arg == '--help':
            usage(program)
            sys.exit(1)

        elif arg == "-V":
            sys.stdout.write("revlang %s\n" % VERSION)
            sys.exit(1)

        elif arg == "-t" or arg == "--tokens":
            args.tokens = True

        elif arg.startswith("-v") and set(arg[1:]) == {"v"}:
            args.verbose += len(arg[1:])

        elif arg in opts1:
            target, type_ = opts1[arg]
            if not argvalues:
                usage(program)
                sys.exit(1)
            setattr(args, target, type_(argvalues.pop(0)))

        elif arg.split('=', 1)[0] in opts2:
            name = arg.split('=', 1)[0]
            target, type_ = opts2[name]
            if '=' in arg:
                value = arg.split('=', 1)[-1]
            elif argvalues:
                value = argvalues.pop(0)
            else:
                usage(program)
                sys.exit(1)
            setattr(args, target, type_(value))

        else:
            args.positional.append(arg)

    return args

def main(argv=None):

    args = parse_args(sys.argv if argv is None else argv)

    logging.basicConfig(level=logging.WARNING)

    log_scanner = logging.getLogger("revlang.scanner")
    log_parser = logging.getLogger("revlang.parser")
    log_frontend = logging.getLogger("revlang.frontend")

    #  0: warnings only
    #  1: info
    #  2: debug scanner and parser
    if args.verbose > 1:
        for log in (log_scanner, log_parser, log_frontend):
            log.setLevel(logging.DEBUG)
    elif args.verbose == 1:
        for log in (log_scanner, log_parser, log_frontend):
            log.setLevel(logging.INFO)

    path = args.positional[0] if args.positional else "program.txt"
    text = None
    frontend = FrontEnd()

    try:
        if path == "-":
            text = sys.stdin.read()
        else:
            with open(path, "r") as src:
                text = src.read()

        if args.tokens:
            output = "".join("%s\n" % tok.toString()
                for tok in frontend.scan(text))
        else:
            tree = frontend.build_text(path, text)
            output = None

        if output is None and args.output:
            frontend.dump(tree, args.output)
        elif output is None:
            sys.stdout.write(tree.toString(True))
        elif args.output:
            with open(args.output, "w") as wf:
                wf.write(output)
        else:
            sys.stdout.write(output)

    except ScanError as e:
        # dump the tokens produced before the error
        for tok in frontend.scanner.tokens:
            sys.stderr.write("%s\n" % tok.toString())
        e.format(path, text)
        return 1
    except ParseError as e:
        # dump the tokens which were not consumed
        for tok in frontend.parser.remaining():
            sys.stderr.write("%s\n" % tok.toString())
        e.format(path, text)
        return 1
    except TokenError as e:
        e.format(path, text)
        return 1
    except OSError as e:
        sys.stderr.write("%s\n" % e)
        return 1
    except Exception:
        format_generic(*sys.exc_info())
        return 1

    return 0

if __name__ == '__main__':
    sys.exit(main())
