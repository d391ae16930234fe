import logging

from schema_options.discriminator import get_discriminator_field


def test_returns_property_name():
    assert get_discriminator_field({'discriminator': {'propertyName': 'animal'}}) == 'animal'


def test_missing_discriminator_is_none(caplog):
    with caplog.at_level(logging.WARNING):
        assert get_discriminator_field({}) is None
        assert get_discriminator_field({'discriminator': {}}) is None
        assert get_discriminator_field(None) is None
    assert caplog.records == []


def test_non_string_property_name_warns(caplog):
    with caplog.at_level(logging.WARNING, logger='schema_options.discriminator'):
        assert get_discriminator_field({'discriminator': {'propertyName': 5}}) is None
    assert 'Expecting discriminator to be a string' in caplog.text
