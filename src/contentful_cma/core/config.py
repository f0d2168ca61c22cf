"""Configuración del cliente CMA.

Centraliza variables de entorno (pydantic-settings) para que el transporte
HTTP, los servicios y la CLI lean la misma configuración.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_BASE_URL = "https://api.contentful.com"


def get_user_config_dir() -> Path:
    """Directorio de configuración por usuario (cross-platform, sin dependencias)."""

    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA", str(Path.home())))
        return base / "contentful-cma"
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / "contentful-cma"

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "contentful-cma"
    return Path.home() / ".config" / "contentful-cma"


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


def _parse_env_lines(text: str) -> dict[str, str]:
    data: dict[str, str] = {}
    for raw_line in text.splitlines():
        line = raw_line.strip()
        if not line or line.startswith("#"):
            continue
        if "=" not in line:
            continue
        key, value = line.split("=", 1)
        key = key.strip()
        value = value.strip().strip('"').strip("'")
        if key:
            data[key] = value
    return data


def write_user_env_vars(values: dict[str, str | None], env_path: Path | None = None) -> Path:
    """Escribe/actualiza variables en el .env global del usuario.

    Las claves con valor `None` se ignoran; el resto de variables existentes
    se conserva.
    """

    env_path = env_path or get_user_env_file()
    env_path.parent.mkdir(parents=True, exist_ok=True)

    existing: dict[str, str] = {}
    if env_path.exists():
        existing = _parse_env_lines(env_path.read_text(encoding="utf-8"))

    existing.update({k: v for k, v in values.items() if v is not None})

    lines = ["# contentful-cma user config (.env)"]
    for key in sorted(existing.keys()):
        lines.append(f"{key}={existing[key]}")
    env_path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return env_path


class CMASettings(BaseSettings):
    """Configuración central del cliente.

    Orden de lectura: variables de entorno, `.env` del proyecto y luego el
    `.env` global del usuario.
    """

    model_config = SettingsConfigDict(
        env_prefix="CONTENTFUL_CMA_",
        extra="ignore",
        case_sensitive=False,
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    access_token: str | None = Field(
        default=None,
        description="Token de gestión (CMA) enviado como Bearer.",
    )
    base_url: str = Field(
        default=DEFAULT_BASE_URL,
        min_length=8,
        description="Base URL de la Content Management API.",
    )
    environment: str | None = Field(
        default=None,
        description="Entorno (p.ej. 'master'); si se omite se usan rutas a nivel de space.",
    )
    timeout_seconds: float = Field(
        default=30.0,
        gt=0,
        description="Timeout por request (segundos).",
    )
    user_agent: str = Field(
        default="contentful-cma/0.1 (python)",
        min_length=1,
        description="Valor de X-Contentful-User-Agent.",
    )
    default_locale: str = Field(
        default="en-US",
        min_length=1,
        description="Locale usado cuando una operación necesita uno y la entidad no lo indica.",
    )
    page_limit: int = Field(
        default=100,
        ge=1,
        le=1000,
        description="Tamaño de página por defecto para los listados.",
    )
