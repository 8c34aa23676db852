"""Application configuration models and loader utilities."""

from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path
from typing import Any, cast

from dotenv import dotenv_values
from pydantic import BaseModel, ConfigDict, Field, model_validator


class LoggingSettings(BaseModel):
    """Logging preferences."""

    level: str = Field(default="INFO", description="Root logging level")
    structured: bool = Field(
        default=False, description="Toggle key=value structured logging"
    )


class DecayBucket(BaseModel):
    """Upper bound on elapsed hours paired with the factor applied below it."""

    model_config = ConfigDict(frozen=True)

    max_hours: float = Field(gt=0, description="Exclusive upper bound in hours")
    factor: float = Field(ge=0.0, le=1.0, description="Multiplicative decay")


_DEFAULT_DECAY_BUCKETS = (
    DecayBucket(max_hours=1, factor=1.0),
    DecayBucket(max_hours=3, factor=0.9),
    DecayBucket(max_hours=6, factor=0.8),
    DecayBucket(max_hours=24, factor=0.7),
    DecayBucket(max_hours=168, factor=0.5),
    DecayBucket(max_hours=720, factor=0.3),
)


class MomentumSettings(BaseModel):
    """Vocabularies, weights, and thresholds driving momentum scoring."""

    model_config = ConfigDict(frozen=True)

    hot_keywords: tuple[str, ...] = (
        "preço",
        "quanto custa",
        "valor",
        "orçamento",
        "pagar",
        "comprar",
        "agendar",
        "hoje",
        "urgente",
        "preciso",
        "emergência",
        "agora",
        "disponível",
        "vaga",
        "horário",
        "atendimento",
    )
    warm_keywords: tuple[str, ...] = (
        "informação",
        "como funciona",
        "gostaria",
        "interesse",
        "possível",
        "dúvida",
        "pergunta",
        "serviço",
        "tratamento",
        "cuidado",
        "prevenção",
        "vacina",
        "consulta",
        "exame",
        "check-up",
    )
    cold_keywords: tuple[str, ...] = (
        "olá",
        "oi",
        "bom dia",
        "boa tarde",
        "primeira vez",
        "conhecer",
        "recomendar",
        "indicar",
        "ajuda",
        "dica",
        "orientação",
    )
    urgency_keywords: tuple[str, ...] = (
        "urgente",
        "emergência",
        "socorro",
        "grave",
        "preocupado",
        "doente",
        "machucado",
        "sangue",
        "sangrando",
        "dor",
        "gemendo",
        "não come",
        "vomitando",
        "diarreia",
        "febre",
        "convulsão",
        "envenenado",
    )

    hot_base: float = 60
    hot_weight: float = 10
    warm_base: float = 30
    warm_weight: float = 8
    cold_base: float = 10
    cold_weight: float = 5
    floor_score: float = Field(default=5, ge=0)

    urgency_multiplier: float = Field(default=1.5, ge=1.0)
    unread_step: float = Field(
        default=0.1, ge=0.0, description="Boost fraction per unread message"
    )
    unread_cap: float = Field(
        default=0.5, ge=0.0, le=1.0, description="Maximum unread boost fraction"
    )
    unread_volume_threshold: int = Field(
        default=2, ge=0, description="Unread count above which volume is flagged"
    )

    decay_buckets: tuple[DecayBucket, ...] = _DEFAULT_DECAY_BUCKETS
    stale_factor: float = Field(
        default=0.1, ge=0.0, le=1.0, description="Factor past the last bucket"
    )
    very_recent_hours: float = Field(default=1, gt=0)
    recent_hours: float = Field(default=6, gt=0)
    reactivation_hours: float = Field(default=168, gt=0)

    hot_threshold: float = Field(default=60, gt=0, le=100)
    warm_threshold: float = Field(default=30, gt=0, le=100)
    max_score: float = Field(default=100, gt=0)

    @model_validator(mode="after")
    def check_consistency(self) -> MomentumSettings:
        vocabularies = {
            "hot": set(self.hot_keywords),
            "warm": set(self.warm_keywords),
            "cold": set(self.cold_keywords),
        }
        names = list(vocabularies)
        for index, name in enumerate(names):
            for other in names[index + 1 :]:
                shared = vocabularies[name] & vocabularies[other]
                if shared:
                    msg = (
                        f"{name} and {other} vocabularies overlap: "
                        f"{', '.join(sorted(shared))}"
                    )
                    raise ValueError(msg)

        previous_hours = 0.0
        previous_factor = 1.0
        for bucket in self.decay_buckets:
            if bucket.max_hours <= previous_hours:
                raise ValueError("decay buckets must have increasing max_hours")
            if bucket.factor > previous_factor:
                raise ValueError("decay factors must be non-increasing")
            previous_hours = bucket.max_hours
            previous_factor = bucket.factor
        if self.stale_factor > previous_factor:
            raise ValueError("stale_factor must not exceed the last bucket factor")

        if self.warm_threshold >= self.hot_threshold:
            raise ValueError("warm_threshold must be below hot_threshold")
        if self.hot_threshold > self.max_score:
            raise ValueError("hot_threshold must not exceed max_score")
        return self


class ValuationSettings(BaseModel):
    """Heuristics for the potential value shown on the momentum board."""

    model_config = ConfigDict(frozen=True)

    base_value: float = Field(default=150, gt=0, description="Base consultation")
    hot_multiplier: float = Field(default=3.0, ge=0.0)
    warm_multiplier: float = Field(default=1.5, ge=0.0)
    cold_multiplier: float = Field(default=1.0, ge=0.0)
    jitter: float = Field(
        default=0.0,
        ge=0.0,
        description="Half-width of the random display variation; 0 disables it",
    )
    minimum_value: float = Field(default=50, ge=0.0)


class AppSettings(BaseModel):
    """Aggregated application configuration."""

    logging: LoggingSettings = Field(default_factory=LoggingSettings)
    momentum: MomentumSettings = Field(default_factory=MomentumSettings)
    valuation: ValuationSettings = Field(default_factory=ValuationSettings)


ENV_PREFIX = "PET_MOMENTUM_"


def _normalize_key(raw_key: str) -> list[str]:
    """Convert an environment variable key into a nested attribute path."""
    trimmed = raw_key.removeprefix(ENV_PREFIX)
    return [segment.lower() for segment in trimmed.split("__") if segment]


def _merge_into_tree(tree: dict[str, Any], path: list[str], value: Any) -> None:
    """Assign a value to a nested dictionary given a path."""
    cursor = tree
    for segment in path[:-1]:
        next_node = cursor.setdefault(segment, {})
        cursor = cast(dict[str, Any], next_node)
    cursor[path[-1]] = value


def _collect_env_values(
    env_file: Path | str | None, *, include_environment: bool
) -> dict[str, Any]:
    """Load configuration values from environment variables and optional file."""
    collected: dict[str, Any] = {}

    file_values = {}
    if env_file:
        env_path = Path(env_file)
        if env_path.is_file():
            file_values = {
                key: value
                for key, value in dotenv_values(env_path).items()
                if key and key.startswith(ENV_PREFIX)
            }

    env_values: dict[str, str] = {}
    if include_environment:
        env_values = {
            key: value
            for key, value in os.environ.items()
            if key.startswith(ENV_PREFIX)
        }

    combined: dict[str, Any] = {**file_values, **env_values}

    for key, value in combined.items():
        path = _normalize_key(key)
        if not path:
            continue
        normalized_value: Any = value
        if isinstance(value, str) and value == "":
            continue
        if isinstance(value, str):
            lowercase_value = value.lower()
            if lowercase_value == "true":
                normalized_value = True
            elif lowercase_value == "false":
                normalized_value = False
        _merge_into_tree(collected, path, normalized_value)

    return collected


@lru_cache(maxsize=1)
def load_app_settings(
    env_file: Path | str | None = None,
    include_environment: bool = True,
    **overrides: Any,
) -> AppSettings:
    """Load application settings, applying env files and overrides."""
    collected = _collect_env_values(env_file, include_environment=include_environment)
    if overrides:
        collected.update(overrides)
    return AppSettings.model_validate(collected)


__all__ = [
    "AppSettings",
    "DecayBucket",
    "LoggingSettings",
    "MomentumSettings",
    "ValuationSettings",
    "load_app_settings",
]
