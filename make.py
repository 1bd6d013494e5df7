import sys
import subprocess
import datetime


def run(cmd: str):
    print(f"@ {cmd}")
    return subprocess.call(cmd, shell=True)


def python(script: str):
    return run(f"{sys.executable} {script}")


def test_f():
    return run('pytest -v')


def demo_f():
    python('xxd.py dump -c 4 -g 4 hexify.py')
    python('xxd.py generate -t python -l 40 hexify.py')


def install_f():
    return run(f"{sys.executable} -m pip install -e .[test]")


def all_f():
    install_f()
    test_f()


def usage():
    [print(cmd[:-2]) for cmd in globals() if cmd.endswith('_f')]


for cmd in sys.argv[1:]:
    started = datetime.datetime.now()
    print(cmd)
    globals()[f"{cmd}_f"]()
    print(">", f"{datetime.datetime.now() - started}")

if len(sys.argv) < 2:
    usage()
