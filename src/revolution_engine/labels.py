"""
Display labels for role tiers.

Purely presentational: the rules only ever look at ``RoleTier``.
"""

from typing import Dict, Mapping, Optional

from .constants import RoleTheme, RoleTier
from .rules import GameConfig

THEME_LABELS: Dict[RoleTheme, Dict[RoleTier, str]] = {
    RoleTheme.CLASSIC: {
        RoleTier.TOP: "President",
        RoleTier.SECOND: "Vice President",
        RoleTier.MIDDLE: "Citizen",
        RoleTier.FOURTH: "Vice Scum",
        RoleTier.BOTTOM: "Scum",
    },
    RoleTheme.PRESIDENT: {
        RoleTier.TOP: "President",
        RoleTier.SECOND: "Vice President",
        RoleTier.MIDDLE: "Citizen",
        RoleTier.FOURTH: "Scumbag",
        RoleTier.BOTTOM: "Asshole",
    },
    RoleTheme.ROYAL: {
        RoleTier.TOP: "King",
        RoleTier.SECOND: "Duke",
        RoleTier.MIDDLE: "Knight",
        RoleTier.FOURTH: "Peasant",
        RoleTier.BOTTOM: "Beggar",
    },
    RoleTheme.CORPORATE: {
        RoleTier.TOP: "CEO",
        RoleTier.SECOND: "Manager",
        RoleTier.MIDDLE: "Employee",
        RoleTier.FOURTH: "Intern",
        RoleTier.BOTTOM: "Unpaid Intern",
    },
    RoleTheme.MILITARY: {
        RoleTier.TOP: "General",
        RoleTier.SECOND: "Colonel",
        RoleTier.MIDDLE: "Sergeant",
        RoleTier.FOURTH: "Private",
        RoleTier.BOTTOM: "Recruit",
    },
    RoleTheme.DAIFUGO: {
        RoleTier.TOP: "Daifugō",
        RoleTier.SECOND: "Fugō",
        RoleTier.MIDDLE: "Heimin",
        RoleTier.FOURTH: "Hinmin",
        RoleTier.BOTTOM: "Daihinmin",
    },
}


def role_label(
    tier: RoleTier,
    theme: RoleTheme = RoleTheme.CLASSIC,
    custom_labels: Optional[Mapping[RoleTier, str]] = None
) -> str:
    if custom_labels and tier in custom_labels:
        return custom_labels[tier]
    return THEME_LABELS[theme][tier]


def label_for(tier: Optional[RoleTier], config: GameConfig) -> Optional[str]:
    """Label a player's role under a game's configuration; None when unranked."""
    if tier is None:
        return None
    return role_label(tier, config.role_theme, config.custom_role_labels)
