"""Configuration loader for policy-evidence."""

from __future__ import annotations

import os
from pathlib import Path
from typing import List, Optional

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, Field, ValidationError

from policy_evidence.domain.errors import ConfigError
from policy_evidence.evidence.constants import Heuristics


class AppConfig(BaseModel):
    name: str = Field(default="policy-evidence")
    environment: str = Field(default="development")


class LoggingConfig(BaseModel):
    level: str = Field(default="INFO")
    json_output: bool = Field(default=True)


class EvidenceConfig(BaseModel):
    threshold: float = Field(default=0.18, ge=0.0, le=1.0)
    sections: List[str] = Field(default_factory=lambda: ["tldr"])
    max_quote_chars: int = Field(default=300, gt=0)
    merge_min_words: int = Field(default=6, ge=0)
    list_merge_min_words: int = Field(default=3, ge=0)
    min_claim_words: int = Field(default=3, ge=0)
    max_claims: int = Field(default=6, gt=0)
    continuation_words: List[str] = Field(default_factory=lambda: ["and", "or", "but", "also", "with"])
    short_claim_tokens: int = Field(default=4, ge=0)
    short_claim_min_overlap: float = Field(default=0.6, ge=0.0, le=1.0)
    long_claim_min_overlap: float = Field(default=0.35, ge=0.0, le=1.0)
    overlap_weight: float = Field(default=0.6, ge=0.0)
    jaccard_weight: float = Field(default=0.4, ge=0.0)
    number_bonus: float = Field(default=0.1, ge=0.0)

    def to_heuristics(self) -> Heuristics:
        return Heuristics(
            merge_min_words=self.merge_min_words,
            list_merge_min_words=self.list_merge_min_words,
            min_claim_words=self.min_claim_words,
            max_claims=self.max_claims,
            continuation_words=tuple(w.lower() for w in self.continuation_words),
            short_claim_tokens=self.short_claim_tokens,
            short_claim_min_overlap=self.short_claim_min_overlap,
            long_claim_min_overlap=self.long_claim_min_overlap,
            overlap_weight=self.overlap_weight,
            jaccard_weight=self.jaccard_weight,
            number_bonus=self.number_bonus,
        )


class Settings(BaseModel):
    app: AppConfig = Field(default_factory=AppConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    evidence: EvidenceConfig = Field(default_factory=EvidenceConfig)


DEFAULT_CONFIG_PATH = Path("config/default.yaml")


def _load_yaml(path: Path) -> dict:
    try:
        with path.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML in {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise ConfigError(f"Config file must contain a mapping: {path}")
    return data


def _apply_env_overrides(data: dict) -> dict:
    overrides = {
        ("app", "environment"): os.getenv("APP_ENV"),
        ("logging", "level"): os.getenv("LOG_LEVEL"),
        ("logging", "json_output"): os.getenv("LOG_JSON"),
        ("evidence", "threshold"): os.getenv("EVIDENCE_THRESHOLD"),
        ("evidence", "sections"): os.getenv("EVIDENCE_SECTIONS"),
        ("evidence", "max_claims"): os.getenv("EVIDENCE_MAX_CLAIMS"),
        ("evidence", "merge_min_words"): os.getenv("EVIDENCE_MERGE_MIN_WORDS"),
        ("evidence", "list_merge_min_words"): os.getenv("EVIDENCE_LIST_MERGE_MIN_WORDS"),
        ("evidence", "max_quote_chars"): os.getenv("EVIDENCE_MAX_QUOTE_CHARS"),
    }
    for (section, key), value in overrides.items():
        if value is None:
            continue
        if not isinstance(data.get(section), dict):
            data[section] = {}
        if key == "json_output":
            data[section][key] = str(value).strip().lower() in {"1", "true", "yes", "on"}
            continue
        if key == "sections":
            data[section][key] = [s.strip() for s in value.split(",") if s.strip()]
            continue
        if key in {"max_claims", "merge_min_words", "list_merge_min_words", "max_quote_chars"}:
            try:
                data[section][key] = int(value)
                continue
            except ValueError:
                # keep original so validation reports it
                pass
        if key == "threshold":
            try:
                data[section][key] = float(value)
                continue
            except ValueError:
                pass
        data[section][key] = value
    return data


def load_config(path: Optional[Path] = None) -> Settings:
    """Load configuration from YAML and environment variables."""
    load_dotenv()
    env_path = os.getenv("POLICY_EVIDENCE_CONFIG")
    config_path = Path(path) if path else Path(env_path) if env_path else DEFAULT_CONFIG_PATH
    if config_path.exists():
        raw = _load_yaml(config_path)
    elif path is not None or env_path:
        raise ConfigError(f"Config file not found: {config_path}")
    else:
        raw = {}
    merged = _apply_env_overrides(raw)
    try:
        return Settings(**merged)
    except ValidationError as exc:
        raise ConfigError(f"Invalid configuration: {exc}") from exc


__all__ = [
    "Settings",
    "AppConfig",
    "LoggingConfig",
    "EvidenceConfig",
    "load_config",
    "DEFAULT_CONFIG_PATH",
]
