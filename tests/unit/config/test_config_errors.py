from poke.config.errors import ConfigurationError
from poke.exceptions import PokeError


def test_configuration_error_is_poke_error():
    assert issubclass(ConfigurationError, PokeError)


def test_missing_value_with_context():
    err = ConfigurationError.missing_value("url", "required for http")
    assert str(err) == "url is missing or empty: required for http"
    assert err.param_name == "url"


def test_invalid_format_includes_expected_format():
    err = ConfigurationError.invalid_format("timeout", "abc", "a duration")
    assert str(err) == "timeout has invalid format (received 'abc'). Expected a duration"


def test_invalid_value_without_reason():
    err = ConfigurationError.invalid_value("timeout", "0s")
    assert str(err) == "Invalid value for timeout: '0s'"
