"""Tests for the upload form's free-text parsers."""
from datetime import timedelta

import pytest

from adapters.telegram.parsing import parse_kickoff, parse_price


def test_kickoff_is_aware_in_configured_zone():
    winter = parse_kickoff(' 01/03/2024 18:00 ', tz='Europe/London')
    summer = parse_kickoff('01/06/2024 18:00', tz='Europe/London')

    assert (winter.hour, winter.minute) == (18, 0)
    assert winter.utcoffset() == timedelta(0)
    assert summer.utcoffset() == timedelta(hours=1)


def test_kickoff_defaults_to_settings_zone(monkeypatch):
    from config.settings import settings
    monkeypatch.setattr(settings, 'timezone', 'Europe/Madrid')

    assert parse_kickoff('01/03/2024 18:00').utcoffset() == timedelta(hours=1)


@pytest.mark.parametrize('text', ['2024-03-01 18:00', '31/02/2024 18:00', 'friday'])
def test_kickoff_rejects_bad_input(text):
    with pytest.raises(ValueError):
        parse_kickoff(text)


@pytest.mark.parametrize('text, expected', [('60', 60.0), ('£6,50', 6.5), (' 0 ', 0.0)])
def test_price(text, expected):
    assert parse_price(text) == expected


@pytest.mark.parametrize('text', ['-1', 'free'])
def test_price_rejects_bad_input(text):
    with pytest.raises(ValueError):
        parse_price(text)
