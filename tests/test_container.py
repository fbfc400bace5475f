"""Tests for container wiring."""

import pytest

from tiffin_planner.containers import build_container


def test_build_container_creates_services(settings) -> None:
    container = build_container(settings)

    assert container.plan_service.pricing.full_price == 65
    assert container.plan_service.member_ids is None
    assert container.user_service.hasher.rounds == 4


def test_build_container_rejects_malformed_roster(settings) -> None:
    settings.group_member_ids = "not-a-uuid"

    with pytest.raises(ValueError):
        build_container(settings)
