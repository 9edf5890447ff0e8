import pytest
from click.testing import CliRunner

from xor_breaker.cli import cli
from xor_breaker.demo import SAMPLE_PLAINTEXT
from xor_breaker.logs import reset_logging
from xor_breaker.utils import b64_decode, b64_encode
from xor_breaker.xor import encrypt


@pytest.fixture(autouse=True)
def clean_logging():
    yield
    reset_logging()


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def ciphertext_file(tmp_path):
    path = tmp_path / "encrypted.txt"
    path.write_text(b64_encode(encrypt(SAMPLE_PLAINTEXT, b"ICE")))
    return path


class TestSolve:
    """Test suite for the solve command"""

    def test_solve_file(self, runner, ciphertext_file, tmp_path):
        """Test solving a base64 file and writing the plaintext"""
        output = tmp_path / "plaintext.txt"
        result = runner.invoke(cli, ["solve", "-c", str(ciphertext_file), "-o", str(output)])
        assert result.exit_code == 0, result.output
        assert "ICE" in result.output
        assert output.read_bytes() == SAMPLE_PLAINTEXT

    def test_bounds_from_env(self, runner, ciphertext_file, tmp_path):
        """Test that key size bounds can come from the environment"""
        output = tmp_path / "plaintext.txt"
        result = runner.invoke(
            cli,
            ["solve", "-c", str(ciphertext_file), "-o", str(output)],
            env={"XOR_BREAKER_MIN_KEY_SIZE": "3", "XOR_BREAKER_MAX_KEY_SIZE": "3"},
        )
        assert result.exit_code == 0, result.output
        assert output.read_bytes() == SAMPLE_PLAINTEXT

    def test_inverted_bounds(self, runner, ciphertext_file):
        """Test that inverted bounds are reported as an error"""
        result = runner.invoke(
            cli, ["solve", "-c", str(ciphertext_file), "--min-key-size", "9", "--max-key-size", "3"]
        )
        assert result.exit_code == 1
        assert "must not be below the minimum" in result.output

    def test_needs_a_source(self, runner):
        """Test that a ciphertext source is required"""
        result = runner.invoke(cli, ["solve"])
        assert result.exit_code == 2
        assert "--ciphertext-path or --ciphertext-url" in result.output

    def test_bad_base64(self, runner, tmp_path):
        """Test that malformed base64 is reported"""
        path = tmp_path / "bad.txt"
        path.write_text("not*base64")
        result = runner.invoke(cli, ["solve", "-c", str(path)])
        assert result.exit_code == 1
        assert "Invalid base64" in result.output

    def test_strict_short_ciphertext(self, runner, tmp_path):
        """Test that strict mode fails on a too-short ciphertext"""
        path = tmp_path / "short.txt"
        path.write_text(b64_encode(b"abc"))
        result = runner.invoke(cli, ["solve", "-c", str(path), "--strict"])
        assert result.exit_code == 1
        assert "too short" in result.output

    def test_short_ciphertext_warns(self, runner, tmp_path):
        """Test that a best-effort result is flagged"""
        path = tmp_path / "short.txt"
        path.write_text(b64_encode(b"abc"))
        result = runner.invoke(cli, ["solve", "-c", str(path)])
        assert result.exit_code == 0
        assert "unreliable" in result.output


class TestEncrypt:
    """Test suite for the encrypt command"""

    def test_encrypt(self, runner, tmp_path):
        """Test that encrypt prints base64 repeating-key XOR output"""
        path = tmp_path / "plain.txt"
        path.write_bytes(b"hello")
        result = runner.invoke(cli, ["encrypt", "-p", str(path), "-k", "ICE"])
        assert result.exit_code == 0, result.output
        assert b64_decode(result.output.strip()) == encrypt(b"hello", b"ICE")


class TestDemo:
    """Test suite for the demo command"""

    def test_demo(self, runner):
        """Test that the demo recovers the sample key"""
        result = runner.invoke(cli, ["demo"])
        assert result.exit_code == 0, result.output
        assert "ICE" in result.output
        assert "lighthouse keeper" in result.output


class TestVerbose:
    """Test suite for the verbosity flag"""

    def test_verbose_logs_progress(self, runner, ciphertext_file, tmp_path):
        """Test that -v logs pipeline events without touching the plaintext file"""
        output = tmp_path / "plaintext.txt"
        result = runner.invoke(cli, ["-v", "solve", "-c", str(ciphertext_file), "-o", str(output)])
        assert result.exit_code == 0, result.output
        assert "key_size_estimated" in result.output
        assert output.read_bytes() == SAMPLE_PLAINTEXT
