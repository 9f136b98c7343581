import logging
from logging.handlers import RotatingFileHandler

from click.testing import CliRunner

from ipprefix.cli import main
from ipprefix.config import set_config


def run(*args, **kwargs):
    return CliRunner().invoke(main, list(args), **kwargs)


def test_make_from_address_and_length():
    result = run("prefix", "make", "192.168.1.5", "24")
    assert result.exit_code == 0
    assert "192.168.1.0/24" in result.output
    assert "192.168.1.255" in result.output
    assert "IPv4" in result.output


def test_make_from_text():
    result = run("prefix", "make", "2001:db8::1/32")
    assert result.exit_code == 0
    assert "2001:db8::/32" in result.output
    assert "2001:db8:ffff:ffff:ffff:ffff:ffff:ffff" in result.output


def test_make_reports_width_error():
    result = run("prefix", "make", "10.0.0.0/33")
    assert result.exit_code == 1
    assert "CIDR value '33' is > network bit count '32'" in result.output


def test_make_reports_missing_slash():
    result = run("prefix", "make", "10.0.0.0")
    assert result.exit_code == 1
    assert "IP/PREFIX" in result.output


def test_no_details_reports_kind_only():
    result = run("--no-details", "prefix", "make", "10.0.0.0")
    assert result.exit_code == 1
    assert "missing_slash" in result.output
    assert "IP/PREFIX" not in result.output


def test_min_max_range():
    assert run("prefix", "min", "10.1.2.3/8").output.strip() == "10.0.0.0"
    assert run("prefix", "max", "::/0").output.strip() == "ffff:ffff:ffff:ffff:ffff:ffff:ffff:ffff"
    result = run("prefix", "range", "0.0.0.0/0")
    assert result.output.split() == ["0.0.0.0", "255.255.255.255"]


def test_subnet_of():
    result = run("prefix", "subnet-of", "10.0.0.0/8", "10.1.0.0/16")
    assert result.exit_code == 0
    assert result.output.startswith("Yes")

    result = run("prefix", "subnet-of", "10.1.0.0/16", "10.0.0.0/8")
    assert result.output.startswith("No")

    result = run("prefix", "subnet-of", "10.0.0.0/8", "10.200.0.1")
    assert result.output.startswith("Yes")


def test_subnet_of_bad_candidate():
    result = run("prefix", "subnet-of", "10.0.0.0/8", "10.0.0")
    assert result.exit_code == 1
    assert "Invalid IP address '10.0.0'" in result.output


def test_encode_decode():
    result = run("prefix", "encode", "10.0.0.0/8")
    assert result.output.strip() == "00000000000000000000ffff0a00000008"

    result = run("prefix", "decode", "00000000000000000000ffff0a01020308")
    assert result.output.strip() == "10.0.0.0/8"


def test_decode_errors():
    assert run("prefix", "decode", "zz").exit_code == 2

    result = run("prefix", "decode", "00")
    assert result.exit_code == 1
    assert "not yet supported" in result.output


def test_batch_from_stdin():
    result = run("prefix", "batch", input="10.1.2.3/8\nbad\n\n2001:db8::1/32\n")
    assert result.exit_code == 1
    assert "10.0.0.0/8" in result.output
    assert "2001:db8::/32" in result.output
    assert "Failed: 1" in result.output


def test_batch_all_valid(tmp_path):
    source = tmp_path / "networks.txt"
    source.write_text("192.168.0.0/16\n::ffff:10.0.0.1/8\n")
    result = run("prefix", "batch", str(source))
    assert result.exit_code == 0
    assert "Failed: 0" in result.output


def test_version():
    result = run("--version")
    assert result.exit_code == 0
    assert "0.1.0" in result.output


def test_log_level_from_environment(monkeypatch):
    monkeypatch.setenv("IPPREFIX_LOG_LEVEL", "ERROR")
    set_config(None)
    result = run("prefix", "min", "10.0.0.0/8")
    assert result.exit_code == 0
    logger = logging.getLogger("ipprefix")
    assert logger.level == logging.ERROR
    assert logger.getEffectiveLevel() == logging.ERROR


def test_debug_flag_overrides_configured_level(monkeypatch):
    monkeypatch.setenv("IPPREFIX_LOG_LEVEL", "ERROR")
    set_config(None)
    assert run("--debug", "prefix", "min", "10.0.0.0/8").exit_code == 0
    assert logging.getLogger("ipprefix").level == logging.DEBUG


def test_unknown_log_level_is_a_usage_error(monkeypatch):
    monkeypatch.setenv("IPPREFIX_LOG_LEVEL", "LOUD")
    set_config(None)
    result = run("prefix", "min", "10.0.0.0/8")
    assert result.exit_code == 2
    assert "Unknown log level 'LOUD'" in result.output


def test_log_file_records_failed_rows(monkeypatch, tmp_path):
    monkeypatch.setenv("IPPREFIX_LOG_DIR", str(tmp_path))
    set_config(None)
    result = run("--log-file", "prefix", "batch", input="10.0.0.0/8\n10.0.0.0/40\n")
    assert result.exit_code == 1

    logger = logging.getLogger("ipprefix")
    file_handlers = [h for h in logger.handlers if isinstance(h, RotatingFileHandler)]
    assert len(file_handlers) == 1
    file_handlers[0].flush()

    log_text = (tmp_path / "ipprefix.log").read_text(encoding="utf-8")
    assert "mask_exceeds_width" in log_text
    assert "{'row': 1}" in log_text
