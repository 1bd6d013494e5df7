import pytest

import xxd

sample = bytes([0, 255, 127, 128, 56, 65, 1, 33])


@pytest.fixture
def infile(tmp_path):
    path = tmp_path / "sample.bin"
    path.write_bytes(sample)
    return str(path)


def test_dump_to_stdout(infile, capsys):
    assert xxd.main(["dump", infile]) == 0
    assert capsys.readouterr().out == "00000000: 00 FF 7F 80 38 41 01 21  ....8A.!\n"


def test_dump_to_file(infile, tmp_path):
    outfile = tmp_path / "sample.txt"
    assert xxd.main(["dump", infile, str(outfile)]) == 0
    assert outfile.read_text() == "00000000: 00 FF 7F 80 38 41 01 21  ....8A.!\n"


def test_dump_seek_and_length(infile, capsys):
    assert xxd.main(["dump", "-s", "2", "-l", "3", infile]) == 0
    assert capsys.readouterr().out == "00000000: 7F 80 38 " + " " * 15 + " ..8\n"


def test_dump_start_address(infile, capsys):
    assert xxd.main(["dump", "-a", "0x10", "-c", "4", infile]) == 0
    assert capsys.readouterr().out.splitlines() == [
        "00000010: 00 FF 7F 80  ....",
        "00000014: 38 41 01 21  8A.!",
    ]


def test_dump_options_after_file(infile, capsys):
    assert xxd.main(["dump", infile, "-g", "4", "-c", "2"]) == 0
    assert capsys.readouterr().out == "00000000: 00FF7F80 38410121  ....8A.!\n"


def test_dump_plain(infile, capsys):
    assert xxd.main(["dump", "-p", "-c", "4", infile]) == 0
    assert capsys.readouterr().out == "00FF7F80\n38410121\n"


def test_dump_lowercase(infile, capsys):
    assert xxd.main(["dump", "-u", "-l", "2", infile]) == 0
    assert capsys.readouterr().out.startswith("00000000: 00 ff ")


def test_dump_format(infile, capsys):
    assert xxd.main(["dump", "-f", "oct", "-c", "2", "-l", "2", infile]) == 0
    assert capsys.readouterr().out == "00000000: 000 377  ..\n"


def test_dump_invalid_format(infile, capsys):
    assert xxd.main(["dump", "-f", "hexx", infile]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "invalid format 'hexx'" in captured.err


def test_dump_rejects_zero_columns(infile, capsys):
    assert xxd.main(["dump", "-c", "0", infile]) == 1
    err = capsys.readouterr().err
    assert "-c must be at least 1" in err
    assert "Usage:" in err


def test_dump_rejects_non_numeric_length(infile, capsys):
    assert xxd.main(["dump", "-l", "many", infile]) == 1
    assert "-l expects a number" in capsys.readouterr().err


def test_dump_missing_file(tmp_path, capsys):
    assert xxd.main(["dump", str(tmp_path / "missing.bin")]) == 1
    assert f"{xxd.exe}: error: " in capsys.readouterr().err


def test_dump_verbose(infile, capsys):
    assert xxd.main(["dump", "-V", infile]) == 0
    assert "Dumped 1 line(s) to stdout" in capsys.readouterr().err


def test_generate(infile, capsys):
    assert xxd.main(["generate", "-t", "python", "-l", "3", infile]) == 0
    assert capsys.readouterr().out == "data = [ 0x00, 0xFF, 0x7F ]\n"


def test_generate_defaults_to_c(infile, capsys):
    assert xxd.main(["generate", "-s", "6", infile]) == 0
    assert capsys.readouterr().out == "const char data[] = { 0x01, 0x21 };\n"


def test_generate_custom_separator(infile, capsys):
    assert xxd.main(["generate", "-t", "unknown", "-S", ";", "-l", "2", infile]) == 0
    assert capsys.readouterr().out == " 0x00; 0xFF \n"


def test_convert(tmp_path):
    dump_file = tmp_path / "dump.txt"
    dump_file.write_text("00000000: 00 FF 7F 80 38 41 01 21  ....8A.!\n")
    outfile = tmp_path / "restored.bin"
    assert xxd.main(["convert", str(dump_file), str(outfile)]) == 0
    assert outfile.read_bytes() == sample


def test_convert_malformed_dump(tmp_path, capsys):
    dump_file = tmp_path / "dump.txt"
    dump_file.write_text("not a dump\n")
    assert xxd.main(["convert", str(dump_file), str(tmp_path / "out.bin")]) == 1
    assert "line 1: missing address" in capsys.readouterr().err


def test_unknown_command(capsys):
    assert xxd.main(["reverse"]) == 1
    assert "unknown command 'reverse'" in capsys.readouterr().err


def test_no_command(capsys):
    assert xxd.main([]) == 1
    assert "command is not given" in capsys.readouterr().err


def test_unknown_option(capsys):
    assert xxd.main(["generate", "-f", "hex"]) == 1
    assert "Usage:" in capsys.readouterr().err


def test_too_many_arguments(infile, capsys):
    assert xxd.main(["dump", infile, "out.txt", "extra"]) == 1
    assert "too many arguments: extra" in capsys.readouterr().err


def test_help(capsys):
    assert xxd.main(["-?"]) == 0
    assert "Usage:" in capsys.readouterr().out


def test_version(capsys):
    assert xxd.main(["-v"]) == 0
    assert capsys.readouterr().out == xxd.VERSION + "\n"


def test_parse_number():
    assert xxd.parse_number("-a", "16") == 16
    assert xxd.parse_number("-a", "0x10") == 16
    assert xxd.parse_number("-a", "0X1f") == 31
    with pytest.raises(xxd.UsageError):
        xxd.parse_number("-c", "0", 1)
    with pytest.raises(xxd.UsageError):
        xxd.parse_number("-s", "-1")
