from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import datetime

from app.domain.entities.plan import PlanState
from app.domain.entities.profile import ProfilePage
from app.domain.exceptions import FeatureAccessDeniedError, InvalidAppearanceOptionError
from app.domain.services.entitlements import is_pro


@dataclass(frozen=True)
class AppearanceCatalog:
    name: str
    free_options: tuple[str, ...]
    premium_options: tuple[str, ...]
    default: str
    denied_message: str = ""

    @property
    def options(self) -> tuple[str, ...]:
        return self.free_options + self.premium_options


THEMES = AppearanceCatalog(
    name="theme",
    free_options=("default",),
    premium_options=(
        "influencer",
        "creator",
        "streamer",
        "minimalist",
        "sunset",
        "hyperliquid",
        "barbie",
    ),
    default="default",
    denied_message="Theme available only for Pro users.",
)

BACKGROUNDS = AppearanceCatalog(
    name="background",
    free_options=("none",),
    premium_options=(
        "particles",
        "wave",
        "gradient",
        "matrix",
        "blockchain",
        "glamour",
        "lashes",
        "sobrancelhas",
        "cabelos",
        "petshop",
        "hyperliquid",
        "cryptobubbles",
        "galaxy",
    ),
    default="none",
    denied_message="Live backgrounds available only for Pro users.",
)

LINK_LAYOUTS = AppearanceCatalog(
    name="layout",
    free_options=("list",),
    premium_options=("grid", "carousel"),
    default="list",
    denied_message="Grid and carousel layouts available only for Pro users.",
)

BUTTON_SIZES = AppearanceCatalog(
    name="button size",
    free_options=("micro", "small", "regular", "large"),
    premium_options=(),
    default="regular",
)


def ensure_option_allowed(
    catalog: AppearanceCatalog,
    value: str,
    *,
    plan_state: PlanState,
    now: datetime,
) -> None:
    if value not in catalog.options:
        raise InvalidAppearanceOptionError(f"Invalid {catalog.name}: '{value}'.")
    if value in catalog.premium_options and not is_pro(plan_state, now=now):
        raise FeatureAccessDeniedError(catalog.denied_message)


def apply_plan_fallbacks(profile: ProfilePage, *, plan_state: PlanState, now: datetime) -> ProfilePage:
    """Versao do perfil que o plano atual pode exibir.

    Apenas leitura: o que foi salvo continua intacto e volta a valer se o
    usuario renovar o plano.
    """
    if is_pro(plan_state, now=now):
        return profile
    return replace(
        profile,
        theme_id=THEMES.default,
        background_type=BACKGROUNDS.default,
        background_enabled=False,
        links_layout=LINK_LAYOUTS.default,
    )
