import os
import sys
import getopt
import datetime

import hexify
import hexarray
import unhexify
import bytesource

VERSION = "xxd-py  Version 0.1.0"

exe = os.path.basename(sys.argv[0])
usage_msg = f"""
Usage: {exe} dump [-f format] [-u] [-c columns] [-g group_size] [-a address]
              [-s seek] [-l length] [-p] [-V] [infile [outfile]]
       {exe} generate [-t language] [-S separator] [-s seek] [-l length] [-V]
              [infile [outfile]]
       {exe} convert [-V] [infile [outfile]]
       {exe} -? | -v

Options:
  -f format       - dump format: hex, hexlower, dec, oct, bin (default: hex)
  -u              - lowercase hex digits
  -c columns      - byte groups per line (default: 8)
  -g group_size   - bytes per group (default: 1)
  -a address      - address of the first byte, decimal or 0x-prefixed (default: 0)
  -p              - plain dump: no address, separators or interpretation
  -t language     - generate template: c, cpp, rust, python (default: c)
  -S separator    - separator between generated values (default: ',')
  -s seek         - number of input bytes to skip
  -l length       - maximum number of input bytes to read
  -V              - print progress messages to stderr
  -?              - this help
  -v              - version

A missing infile or outfile, or '-', means stdin or stdout.
"""

COMMAND_OPTIONS = {
    "dump": "f:uc:g:a:s:l:pV",
    "generate": "t:S:s:l:V",
    "convert": "V",
}

flag_verbose = False


class UsageError(Exception):
    pass


def now_prefix():
    return datetime.datetime.now().strftime('%Y-%m-%d %H:%M:%S')


def log(msg):
    if flag_verbose:
        print(f"{now_prefix()} {msg}", file=sys.stderr)


def report_error(e):
    print(f"{exe}: error: {e}", file=sys.stderr)


def parse_number(opt, val, minimum=0):
    try:
        n = int(val, 16) if val.lower().startswith("0x") else int(val, 10)
    except ValueError:
        raise UsageError(f"{opt} expects a number, got '{val}'") from None
    if n < minimum:
        raise UsageError(f"{opt} must be at least {minimum}, got {n}")
    return n


def parse_args(argv):
    if not argv or argv[0] not in COMMAND_OPTIONS:
        if argv and argv[0] == "-?":
            return "help", {}, []
        if argv and argv[0] == "-v":
            return "version", {}, []
        raise UsageError(f"unknown command '{argv[0]}'" if argv else "command is not given")
    command = argv[0]
    try:
        opts, args = getopt.gnu_getopt(argv[1:], COMMAND_OPTIONS[command])
    except getopt.GetoptError as e:
        raise UsageError(str(e)) from None
    if len(args) > 2:
        raise UsageError(f"too many arguments: {' '.join(args[2:])}")
    return command, dict(opts), args


def bounds(opts):
    seek = parse_number("-s", opts["-s"]) if "-s" in opts else 0
    length = parse_number("-l", opts["-l"]) if "-l" in opts else None
    return seek, length


def dump_settings(opts):
    fmt = hexify.Format.parse(opts.get("-f", "hex"))
    if "-u" in opts and fmt is hexify.Format.HEX_UPPER:
        fmt = hexify.Format.HEX_LOWER
    settings = hexify.Settings(
        start_address=parse_number("-a", opts.get("-a", "0")),
        group_size=parse_number("-g", opts.get("-g", "1"), 1),
        columns=parse_number("-c", opts.get("-c", "8"), 1),
        format=fmt)
    if "-p" in opts:
        settings = settings._replace(
            use_separator=False, show_address=False, show_interpretation=False)
    return settings


def dump(opts, infile, outfile):
    settings = dump_settings(opts)
    seek, length = bounds(opts)
    log(f"Dumping {infile or 'stdin'}: {settings.bytes_per_line} byte(s) per line, "
        f"format {settings.format.value}, seek {seek}, length {length}")
    with bytesource.open_source(infile) as reader, bytesource.open_sink(outfile) as writer:
        source = bytesource.bounded(bytesource.stream_bytes(reader), seek, length)
        lines = hexify.dump(source, writer, settings)
    log(f"Dumped {lines} line(s) to {outfile or 'stdout'}")


def generate(opts, infile, outfile):
    template = hexarray.template_for(opts.get("-t", "c"))
    if "-S" in opts:
        template = template._replace(separator=opts["-S"])
    seek, length = bounds(opts)
    with bytesource.open_source(infile) as reader:
        data = bytes(bytesource.bounded(bytesource.stream_bytes(reader), seek, length))
    log(f"Read {len(data)} byte(s) from {infile or 'stdin'}")
    with bytesource.open_sink(outfile) as writer:
        try:
            writer.write(template.render(data) + "\n")
        except OSError as e:
            raise hexify.SinkWriteFailure(f"cannot write generated source: {e}") from e
    log(f"Generated {len(data)} value(s) to {outfile or 'stdout'}")


def convert(opts, infile, outfile):
    with bytesource.open_source(infile, binary=False) as reader, \
            bytesource.open_sink(outfile, binary=True) as writer:
        n = unhexify.convert(reader, writer)
    log(f"Converted {n} byte(s) to {outfile or 'stdout'}")


COMMANDS = {
    "dump": dump,
    "generate": generate,
    "convert": convert,
}


def main(argv=None):
    global flag_verbose

    if argv is None:
        argv = sys.argv[1:]

    try:
        command, opts, args = parse_args(argv)
        if command == "help":
            print(usage_msg)
            return 0
        if command == "version":
            print(VERSION)
            return 0
        flag_verbose = "-V" in opts
        infile = args[0] if args else None
        outfile = args[1] if len(args) > 1 else None
        COMMANDS[command](opts, infile, outfile)
    except UsageError as e:
        report_error(e)
        print(usage_msg, file=sys.stderr)
        return 1
    except (hexify.XxdError, OSError) as e:
        report_error(e)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
