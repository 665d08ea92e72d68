"""
XML report adapters
Reads the collected games list and writes game / status reports
"""

import logging
from pathlib import Path
from typing import Iterable, List

import xmltodict

from .models import Game, GameResult

logger = logging.getLogger(__name__)

ROOT_ELEMENTS = ("games", "jogos")  # "jogos" is the legacy root name


def _as_list(value) -> list:
    # the parser collapses a single <game> into a bare dict
    if value is None:
        return []
    if isinstance(value, list):
        return value
    return [value]


def parse_games(file_path) -> List[Game]:
    """Load games from an XML file with a <games> (or <jogos>) root."""
    xml_data = Path(file_path).read_text(encoding="utf-8")
    document = xmltodict.parse(xml_data) or {}

    root = None
    for name in ROOT_ELEMENTS:
        if document.get(name) is not None:
            root = document[name]
            break

    if not isinstance(root, dict) or not root.get("game"):
        return []

    games = []
    for entry in _as_list(root["game"]):
        games.append(Game.model_validate(entry if isinstance(entry, dict) else {}))
    return games


def _write_xml(document: dict, file_path) -> Path:
    output_path = Path(file_path)
    try:
        xml = xmltodict.unparse(document, pretty=True, indent="  ", newl="\n")
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(xml, encoding="utf-8")
    except Exception as e:
        logger.error(f"Failed to save XML to {output_path}: {e}")
        raise
    return output_path


def save_games(games: Iterable[Game], file_path) -> Path:
    """Write the collected games list (games_list.xml shape)."""
    document = {"games": {"game": [g.to_xml_dict() for g in games]}}
    output_path = _write_xml(document, file_path)
    logger.info(f"Games data saved to {output_path}")
    return output_path


def save_results(results: Iterable[GameResult], file_path) -> Path:
    """Write verification results (game_statuses.xml shape)."""
    document = {"games": {"game": [r.to_xml_dict() for r in results]}}
    output_path = _write_xml(document, file_path)
    logger.info(f"Results saved to: {output_path.resolve()}")
    return output_path
