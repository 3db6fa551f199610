"""Tests for type definitions."""

import pytest
from cryptography.hazmat.primitives import hashes

from keysmith.constants import DEFAULT_PBKDF2_ROUNDS, KEY_BUFF_SIZE
from keysmith.types import KdfConfig, PrfAlgorithm, resolve_prf, validate_rounds


class TestPrfAlgorithm:
    """Tests for PRF resolution."""

    def test_enum_to_hash(self) -> None:
        """Test that each member maps to its hash."""
        assert isinstance(PrfAlgorithm.SHA256.hash_algorithm(), hashes.SHA256)
        assert isinstance(PrfAlgorithm.SHA384.hash_algorithm(), hashes.SHA384)
        assert isinstance(PrfAlgorithm.SHA512.hash_algorithm(), hashes.SHA512)

    def test_resolve_name_case_insensitive(self) -> None:
        """Test that names resolve regardless of case."""
        assert isinstance(resolve_prf("SHA512"), hashes.SHA512)

    def test_resolve_instance_passthrough(self) -> None:
        """Test that hash instances are used as given."""
        algorithm = hashes.SHA3_256()
        assert resolve_prf(algorithm) is algorithm

    def test_resolve_unknown(self) -> None:
        """Test that unknown names are rejected."""
        with pytest.raises(ValueError, match="Unsupported PRF: 'md5'"):
            resolve_prf("md5")


class TestValidateRounds:
    """Tests for round count validation."""

    @pytest.mark.parametrize("rounds", [1, 2, 2**32 - 1])
    def test_valid(self, rounds: int) -> None:
        """Test accepted round counts."""
        validate_rounds(rounds)

    @pytest.mark.parametrize("rounds", [0, -5, 2**32])
    def test_out_of_range(self, rounds: int) -> None:
        """Test rejected round counts."""
        with pytest.raises(ValueError, match="Rounds must be between"):
            validate_rounds(rounds)

    @pytest.mark.parametrize("rounds", [True, 2.0, "2"])
    def test_not_an_integer(self, rounds: object) -> None:
        """Test that non-integers are rejected."""
        with pytest.raises(ValueError, match="Rounds must be an integer"):
            validate_rounds(rounds)  # type: ignore[arg-type]


class TestKdfConfig:
    """Tests for key derivation configuration."""

    def test_defaults(self) -> None:
        """Test default settings."""
        config = KdfConfig()
        assert config.rounds == DEFAULT_PBKDF2_ROUNDS
        assert config.prf == "sha512"
        assert config.key_size == KEY_BUFF_SIZE

    def test_invalid_rounds(self) -> None:
        """Test that invalid rounds fail at construction."""
        with pytest.raises(ValueError):
            KdfConfig(rounds=0)

    def test_invalid_prf(self) -> None:
        """Test that invalid PRFs fail at construction."""
        with pytest.raises(ValueError, match="Unsupported PRF"):
            KdfConfig(prf="whirlpool")

    def test_invalid_key_size(self) -> None:
        """Test that a zero key size fails at construction."""
        with pytest.raises(ValueError, match="Key size must be positive"):
            KdfConfig(key_size=0)

    def test_from_env(self) -> None:
        """Test reading settings from an environment mapping."""
        config = KdfConfig.from_env(
            environ={"KEYSMITH_ROUNDS": "7", "KEYSMITH_PRF": "sha256", "KEYSMITH_KEY_SIZE": "32"}
        )
        assert config.rounds == 7
        assert config.prf == "sha256"
        assert config.key_size == 32

    def test_from_env_defaults(self) -> None:
        """Test that unset variables fall back to defaults."""
        assert KdfConfig.from_env(environ={}) == KdfConfig()

    def test_from_env_prefix(self) -> None:
        """Test a custom variable prefix."""
        config = KdfConfig.from_env(prefix="APP_", environ={"APP_ROUNDS": "3"})
        assert config.rounds == 3

    def test_from_env_reads_os_environ(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test that os.environ is the default source."""
        monkeypatch.setenv("KEYSMITH_ROUNDS", "11")
        assert KdfConfig.from_env().rounds == 11

    def test_from_env_invalid(self) -> None:
        """Test that a non-numeric value is rejected."""
        with pytest.raises(ValueError):
            KdfConfig.from_env(environ={"KEYSMITH_ROUNDS": "many"})
