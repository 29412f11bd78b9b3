"""Tests for assembling profiles from whole career pages."""

import pytest

from career_api.schemas import Battletag, Rank, Tier
from career_api.services.errors import StructuralAbsence, ValueDecodeFailure
from career_api.services.profile_extractor import extract_profile, parse_document
from tests.helpers import DAMAGE_ICON, SUPPORT_ICON, TANK_ICON, build_career_page


def _extract(**kwargs):
    return extract_profile(parse_document(build_career_page(**kwargs)))


def test_unranked_profile():
    profile = _extract(endorsement="3-8ccb5f0aef.svg", roles=[])
    assert profile.endorsement == 3
    assert profile.tank is None
    assert profile.damage is None
    assert profile.support is None


def test_all_roles_ranked():
    profile = _extract(
        roles=[
            (TANK_ICON, "MasterTier-4-abc.png"),
            (DAMAGE_ICON, "PlatinumTier-1-abc.png"),
            (SUPPORT_ICON, "BronzeTier-5-abc.png"),
        ]
    )
    assert profile.tank == Rank(tier=Tier.MASTER, tier_number=4)
    assert profile.damage == Rank(tier=Tier.PLATINUM, tier_number=1)
    assert profile.support == Rank(tier=Tier.BRONZE, tier_number=5)


def test_single_role_leaves_others_empty():
    profile = _extract(roles=[(SUPPORT_ICON, "SilverTier-2-abc.png")])
    assert profile.support == Rank(tier=Tier.SILVER, tier_number=2)
    assert profile.tank is None
    assert profile.damage is None


def test_duplicate_role_later_wins():
    profile = _extract(
        roles=[
            (TANK_ICON, "GoldTier-1-abc.png"),
            (TANK_ICON, "DiamondTier-4-abc.png"),
        ]
    )
    assert profile.tank == Rank(tier=Tier.DIAMOND, tier_number=4)


def test_private_profile():
    profile = _extract(private=True, title="No Title", portrait="")
    assert profile.private is True
    assert profile.title is None
    assert profile.profile_picture is None


def test_scalar_fields():
    profile = _extract(title="Ace Pilot", endorsement="5-8697f241ca.svg")
    assert profile.private is False
    assert profile.title == "Ace Pilot"
    assert profile.endorsement == 5
    assert profile.profile_picture is not None


def test_missing_endorsement_is_fatal():
    with pytest.raises(StructuralAbsence):
        _extract(endorsement=None)


def test_bad_role_entry_fails_whole_profile():
    with pytest.raises(ValueDecodeFailure):
        _extract(roles=[(TANK_ICON, "GoldTier-1-abc.png"), (DAMAGE_ICON, "GoldTier-9-abc.png")])


def test_with_battletag_builds_player_profile():
    battletag = Battletag(name="Player", discriminator=1234)
    profile = _extract(roles=[(DAMAGE_ICON, "GoldTier-2-abc.png")]).with_battletag(battletag)
    assert profile.battletag == battletag
    assert profile.name == "Player#1234"
    assert profile.damage == Rank(tier=Tier.GOLD, tier_number=2)
