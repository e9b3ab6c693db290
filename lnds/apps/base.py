"""
Basic support for running library as script
"""
import os.path as op
import signal
import sys
import logging

from logging import getLogger
from optparse import OptionParser as OptionP, OptionGroup, SUPPRESS_HELP

from natsort import natsorted
from rich.console import Console
from rich.logging import RichHandler

from lnds import __copyright__, __version__

# http://newbebweb.blogspot.com/2012/02/python-head-ioerror-errno-32-broken.html
nobreakbuffer = lambda: signal.signal(signal.SIGPIPE, signal.SIG_DFL)
nobreakbuffer()
LNDSHELP = "LNDS utility libraries {} [{}]\n".format(__version__, __copyright__)
VALUE_TYPES = ("int", "float", "str", "natural")

logger = getLogger("lnds")
logger.propagate = False


class ActionDispatcher(object):
    """
    This class will be invoked
    a) when the base package is run via __main__, listing all MODULESs
    a) when a directory is run via __main__, listing all SCRIPTs
    b) when a script is run directly, listing all ACTIONs

    This is controlled through the meta variable, which is automatically
    determined in get_meta().
    """

    def __init__(self, actions):

        self.actions = actions
        if not actions:
            actions = [(None, None)]
        self.valid_actions, self.action_helps = zip(*actions)

    def get_meta(self):
        args = splitall(sys.argv[0])[-3:]
        args[-1] = args[-1].replace(".py", "")
        if args[-2] == "lnds":
            meta = "MODULE"
        elif args[-1] == "__main__":
            meta = "SCRIPT"
        else:
            meta = "ACTION"
        return meta, args

    def print_help(self):
        meta, args = self.get_meta()
        if meta == "MODULE":
            del args[0]
            args[-1] = meta
        elif meta == "SCRIPT":
            args[-1] = meta
        else:
            args[-1] += " " + meta

        help = "Usage:\n    python -m {0}\n\n\n".format(".".join(args))
        help += "Available {0}s:\n".format(meta)
        max_action_len = max(len(action) for action, ah in self.actions)
        for action, action_help in sorted(self.actions):
            action = action.rjust(max_action_len + 4)
            help += (
                " | ".join((action, action_help[0].upper() + action_help[1:])) + "\n"
            )
        help += "\n" + LNDSHELP

        sys.stderr.write(help)
        sys.exit(1)

    def dispatch(self, globals, argv=None):
        from difflib import get_close_matches

        argv = sys.argv if argv is None else argv
        meta = "ACTION"  # function is only invoked for listing ACTIONs
        if len(argv) == 1:
            self.print_help()

        action = argv[1]

        if action not in self.valid_actions:
            print("[error] {0} not a valid {1}\n".format(action, meta), file=sys.stderr)
            alt = get_close_matches(action, self.valid_actions)
            print(
                "Did you mean one of these?\n\t{0}\n".format(", ".join(alt)),
                file=sys.stderr,
            )
            self.print_help()

        return globals[action](argv[2:])


class OptionParser(OptionP):
    def __init__(self, doc):

        OptionP.__init__(self, doc, epilog=LNDSHELP)

    def parse_args(self, args=None):
        dests = set()
        ol = []
        for g in [self] + self.option_groups:
            ol += g.option_list
        for o in ol:
            if o.dest in dests:
                continue
            self.add_help_from_choices(o)
            dests.add(o.dest)

        opts, args = OptionP.parse_args(self, args)
        if getattr(opts, "verbose", False):
            debug()
        return opts, args

    def add_help_from_choices(self, o):
        if o.help == SUPPRESS_HELP:
            return

        default_tag = "%default"
        assert o.help, "Option {0} do not have help string".format(o)
        help_pf = o.help[:1].upper() + o.help[1:]
        if "[" in help_pf:
            help_pf = help_pf.rsplit("[", 1)[0]
        help_pf = help_pf.strip()

        if o.type == "choice":
            if o.default is None:
                default_tag = "guess"
            ctext = "|".join(natsorted(str(x) for x in o.choices))
            if len(ctext) > 100:
                ctext = ctext[:100] + " ... "
            choice_text = "must be one of {0}".format(ctext)
            o.help = "{0}, {1} [default: {2}]".format(help_pf, choice_text, default_tag)
        else:
            o.help = help_pf
            if o.default is None:
                default_tag = "disabled"
            if (
                o.get_opt_string() not in ("--help", "--version")
                and o.action != "store_false"
            ):
                o.help += " [default: {0}]".format(default_tag)

    def set_order(self, type="int"):
        """
        Add options that control how values are parsed and ordered
        """
        group = OptionGroup(self, "Ordering")
        group.add_option(
            "--type",
            default=type,
            choices=VALUE_TYPES,
            help="Parse values as this type and order them accordingly",
        )
        group.add_option(
            "--reverse",
            default=False,
            action="store_true",
            help="Treat descending order as sorted",
        )
        group.add_option(
            "--strict",
            default=False,
            action="store_true",
            help="Find strictly increasing subsequence, equal values cannot chain",
        )
        self.add_option_group(group)

    def set_outfile(self, outfile="stdout"):
        """
        Add --outfile options to print out to filename.
        """
        self.add_option("-o", "--outfile", default=outfile, help="Outfile name")

    def set_sep(self, sep=None, help="Separator between values"):
        self.add_option("--sep", default=sep, help=help)

    def set_verbose(self, help="Print detailed reports"):
        self.add_option("--verbose", default=False, action="store_true", help=help)


def splitall(path):
    allparts = []
    while True:
        path, p1 = op.split(path)
        if not p1:
            break
        allparts.append(p1)
    allparts = allparts[::-1]
    return allparts


def get_module_docstring(filepath):
    """Get module-level docstring of Python module at filepath, e.g. 'path/to/file.py'."""
    with open(filepath) as fp:
        co = compile(fp.read(), filepath, "exec")
    if co.co_consts and isinstance(co.co_consts[0], str):
        docstring = co.co_consts[0]
    else:
        docstring = None
    return docstring


def dmain(mainfile, type="action"):
    cwd = op.dirname(mainfile)
    pyscripts = (
        [x for x in glob(op.join(cwd, "*", "__main__.py"))]
        if type == "module"
        else glob(op.join(cwd, "*.py"))
    )
    actions = []
    for ps in sorted(pyscripts):
        action = (
            op.basename(op.dirname(ps))
            if type == "module"
            else op.basename(ps).replace(".py", "")
        )
        if action[0] == "_":  # hidden namespace
            continue
        pd = get_module_docstring(ps)
        action_help = (
            [
                x.rstrip(":.,\n")
                for x in pd.splitlines(True)
                if len(x.strip()) > 10 and x[0] != "%"
            ][0]
            if pd
            else "no docstring found"
        )
        actions.append((action, action_help))

    a = ActionDispatcher(actions)
    a.print_help()


def glob(pathname):
    """
    Wraps around glob.glob(), but return a sorted list.
    """
    import glob as gl

    return natsorted(gl.glob(pathname))


def debug(level=logging.DEBUG):
    """
    Turn on the debugging
    """
    logger.setLevel(level)


def setup_logging(level=logging.INFO):
    """
    Send package logs through rich, on stderr
    """
    if not logger.handlers:
        handler = RichHandler(console=Console(stderr=True))
        handler.setFormatter(logging.Formatter("%(message)s", datefmt="[%X]"))
        logger.addHandler(handler)
    logger.setLevel(level)


setup_logging()
