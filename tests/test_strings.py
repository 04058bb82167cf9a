from multiflag import _strings


def test_option_strings():
    assert _strings.option_strings("verbose", ("-", "--")) == ["-verbose", "--verbose"]
    assert _strings.option_strings("v", ("--",)) == ["--v"]


def test_dest_from_name():
    assert _strings.dest_from_name("dry-run") == "dry_run"
    assert _strings.dest_from_name("trace") == "trace"


def test_strip_ansi_sequences():
    assert _strings.strip_ansi_sequences("\x1b[1mTRACE\x1b[0m") == "TRACE"
    assert _strings.format_metavar("TRACE", color=False) == "TRACE"
    assert _strings.strip_ansi_sequences(_strings.format_metavar("TRACE")) == "TRACE"
