# どこで: `src/rasterix/core/runtime_config.py`。
# 何を: config.yaml による実行時設定（探索・ロード・キャッシュ）を提供する。
# なぜ: 既定のバッファサイズや退化線分の扱いを、コードを変えずにユーザーが指定できるようにするため。

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from importlib import resources
from pathlib import Path
from typing import Any

_logger = logging.getLogger(__name__)

DEGENERATE_LINE_POLICIES = ("point", "skip")


@dataclass(frozen=True, slots=True)
class RuntimeConfig:
    """rasterix の実行時設定。"""

    config_path: Path | None
    renderer_size: tuple[int, int]
    clear_value: float
    degenerate_line: str


_EXPLICIT_CONFIG_PATH: Path | None = None
_CONFIG_CACHE: RuntimeConfig | None = None


def set_config_path(path: str | Path | None) -> None:
    """以降の設定探索で使う明示 config パスを設定する。

    Notes
    -----
    `path` を None にすると明示指定を解除し、既定の探索に戻る。
    """

    global _EXPLICIT_CONFIG_PATH, _CONFIG_CACHE
    if path is None:
        _EXPLICIT_CONFIG_PATH = None
        _CONFIG_CACHE = None
        return
    _EXPLICIT_CONFIG_PATH = Path(os.path.expandvars(str(path))).expanduser()
    _CONFIG_CACHE = None


def _default_config_candidates() -> tuple[Path, ...]:
    cwd = Path.cwd()
    home = Path.home()
    return (
        cwd / ".rasterix" / "config.yaml",
        home / ".config" / "rasterix" / "config.yaml",
    )


def _as_mapping(value: Any, *, key: str) -> dict[str, Any]:
    if value is None:
        return {}
    if isinstance(value, dict):
        return dict(value)
    raise RuntimeError(f"{key} は mapping である必要があります: got={value!r}")


def _as_positive_int_pair(value: Any, *, key: str) -> tuple[int, int] | None:
    if value is None:
        return None
    try:
        seq = list(value)
    except TypeError as exc:
        raise RuntimeError(f"{key} は [w, h] の配列である必要があります: got={value!r}") from exc
    if len(seq) != 2:
        raise RuntimeError(f"{key} は [w, h] の配列である必要があります: got={value!r}")
    try:
        w = int(seq[0])
        h = int(seq[1])
    except (TypeError, ValueError) as exc:
        raise RuntimeError(f"{key} は [w, h] の整数配列である必要があります: got={value!r}") from exc
    if w <= 0 or h <= 0:
        raise RuntimeError(f"{key} は正の値である必要があります: got={value!r}")
    return (w, h)


def _as_float(value: Any, *, key: str) -> float | None:
    if value is None:
        return None
    if isinstance(value, bool):
        raise RuntimeError(f"{key} は数値である必要があります: got={value!r}")
    try:
        return float(value)
    except (TypeError, ValueError) as exc:
        raise RuntimeError(f"{key} は数値である必要があります: got={value!r}") from exc


def _load_yaml_text(text: str, *, source: str) -> dict[str, Any]:
    import yaml

    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise RuntimeError(f"config.yaml の読み込みに失敗しました: source={source}") from exc

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise RuntimeError(f"config.yaml は mapping である必要があります: source={source}")

    return dict(data)


def _load_yaml_config(path: Path) -> dict[str, Any]:
    text = path.read_text(encoding="utf-8")
    return _load_yaml_text(text, source=str(path))


def _load_packaged_default_config() -> dict[str, Any]:
    """同梱デフォルト config をロードして dict を返す。"""

    blob = (
        resources.files("rasterix")
        .joinpath("resource", "default_config.yaml")
        .read_text(encoding="utf-8")
    )
    return _load_yaml_text(blob, source="rasterix/resource/default_config.yaml")


def _merge_section(payload: dict[str, Any], override: dict[str, Any]) -> None:
    # セクション単位で浅くマージする（キー単位で後勝ち）。
    for key, value in override.items():
        base = payload.get(key)
        if isinstance(base, dict) and isinstance(value, dict):
            merged = dict(base)
            merged.update(value)
            payload[key] = merged
        else:
            payload[key] = value


def runtime_config() -> RuntimeConfig:
    """実行時設定をロードして返す（キャッシュ）。

    上書き順（後勝ち）:
    1) 同梱 default_config.yaml
    2) `./.rasterix/config.yaml` / `~/.config/rasterix/config.yaml`
    3) `set_config_path()` で指定したパス
    """

    global _CONFIG_CACHE
    if _CONFIG_CACHE is not None:
        return _CONFIG_CACHE

    explicit_path = _EXPLICIT_CONFIG_PATH
    if explicit_path is not None and not explicit_path.is_file():
        raise FileNotFoundError(f"config.yaml が見つかりません: {explicit_path}")

    discovered_path: Path | None = None
    for p in _default_config_candidates():
        if p.is_file():
            discovered_path = p
            break

    payload = _load_packaged_default_config()
    if discovered_path is not None:
        _merge_section(payload, _load_yaml_config(discovered_path))
    if explicit_path is not None:
        _merge_section(payload, _load_yaml_config(explicit_path))

    version = payload.get("version")
    if version is None:
        raise RuntimeError(
            "config.yaml の version が未設定です（同梱 default_config.yaml を確認してください）"
        )
    try:
        version_i = int(version)
    except (TypeError, ValueError) as exc:
        raise RuntimeError(f"config.yaml の version は整数である必要があります: got={version!r}") from exc
    if version_i != 1:
        raise RuntimeError(f"未対応の config.yaml version です: got={version_i}")

    renderer = _as_mapping(payload.get("renderer"), key="renderer")
    renderer_size = _as_positive_int_pair(renderer.get("size"), key="renderer.size")
    if renderer_size is None:
        raise RuntimeError(
            "renderer.size が未設定です（同梱 default_config.yaml を確認してください）"
        )
    clear_value = _as_float(renderer.get("clear_value"), key="renderer.clear_value")
    if clear_value is None:
        clear_value = 0.0

    raster = _as_mapping(payload.get("raster"), key="raster")
    degenerate_line = str(raster.get("degenerate_line", "point")).strip().lower()
    if degenerate_line not in DEGENERATE_LINE_POLICIES:
        raise RuntimeError(
            f"raster.degenerate_line は {DEGENERATE_LINE_POLICIES} のいずれかである必要があります: "
            f"got={degenerate_line!r}"
        )

    cfg = RuntimeConfig(
        config_path=explicit_path or discovered_path,
        renderer_size=renderer_size,
        clear_value=float(clear_value),
        degenerate_line=degenerate_line,
    )
    _logger.debug("runtime config loaded: %s", cfg)
    _CONFIG_CACHE = cfg
    return cfg


__all__ = ["DEGENERATE_LINE_POLICIES", "RuntimeConfig", "runtime_config", "set_config_path"]
