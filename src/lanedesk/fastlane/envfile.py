"""Generate fastlane support files from a ProjectConfig.

``fastlane/.env.fastlane`` holds one ``KEY=value`` line per setting and is
loaded by the Fastfile through dotenv. A short note next to it records which
schemes and signing style the file was generated for.
"""

from __future__ import annotations

import logging
from pathlib import Path

from lanedesk.exceptions import LaneDeskError, ProjectNotFoundError
from lanedesk.profile.models import ProjectConfig

logger = logging.getLogger(__name__)

FASTLANE_DIR = "fastlane"
ENV_FILE = ".env.fastlane"
NOTE_FILE = "DESKTOP_GENERATED_NOTE.md"
TEAM_ID_PLACEHOLDER = "TODO_TEAM_ID"


def _flag(value: bool) -> str:
    return "true" if value else "false"


def render_env(config: ProjectConfig) -> str:
    """Render the dotenv file contents for ``config``.

    A blank team id is written as ``TODO_TEAM_ID`` so the Fastfile's
    validation lane reports it instead of signing with an empty team.
    """
    team_id = config.team_id if config.team_id.strip() else TEAM_ID_PLACEHOLDER
    lines = [
        f"SCHEME_DEV={config.scheme_dev}",
        f"SCHEME_DIS={config.scheme_dis}",
        f"BUNDLE_ID_DEV={config.bundle_id_dev}",
        f"BUNDLE_ID_DIS={config.bundle_id_dis}",
        f"TEAM_ID={team_id}",
        f"SIGNING_STYLE={config.signing_style}",
        f"MATCH_GIT_URL={config.match_git_url}",
        f"MATCH_GIT_BRANCH={config.match_git_branch}",
        f"PGYER_API_KEY={config.pgyer_api_key}",
        f"APP_STORE_CONNECT_API_KEY_PATH={config.app_store_connect_api_key_path}",
        f"ENABLE_QUALITY_GATE={_flag(config.enable_quality_gate)}",
        f"ENABLE_TESTS={_flag(config.enable_tests)}",
        f"ENABLE_SWIFTLINT={_flag(config.enable_swiftlint)}",
        f"ENABLE_SNAPSHOT={_flag(config.enable_snapshot)}",
        f"METADATA_PATH={config.metadata_path}",
    ]
    return "\n".join(lines) + "\n"


def render_note(config: ProjectConfig) -> str:
    return (
        "# Generated by lanedesk\n"
        "\n"
        f"- signing_style: {config.signing_style}\n"
        f"- scheme_dev: {config.scheme_dev}\n"
        f"- scheme_dis: {config.scheme_dis}\n"
    )


def generate_fastlane_files(config: ProjectConfig) -> list[Path]:
    """Write the env file and the generation note into ``fastlane/``.

    Returns:
        Paths of the written files.

    Raises:
        ProjectNotFoundError: ``config.project_path`` does not exist.
        LaneDeskError: A file could not be written.
    """
    root = Path(config.project_path)
    if not config.project_path or not root.exists():
        raise ProjectNotFoundError(config.project_path)

    fastlane_dir = root / FASTLANE_DIR
    env_file = fastlane_dir / ENV_FILE
    note_file = fastlane_dir / NOTE_FILE
    try:
        fastlane_dir.mkdir(parents=True, exist_ok=True)
        env_file.write_text(render_env(config), encoding="utf-8")
        note_file.write_text(render_note(config), encoding="utf-8")
    except OSError as exc:
        raise LaneDeskError(f"Write fastlane files failed: {exc}") from exc

    logger.debug("Generated %s and %s", env_file, note_file)
    return [env_file, note_file]
