"""Shared test helpers: canned xcodebuild output and a scripted runner.

External commands are never run by unit tests: every component that spawns
a process accepts a runner, and ``FakeRunner`` stands in for it.
"""

from __future__ import annotations

from lanedesk.exceptions import ToolInvocationError
from lanedesk.process import ProcessOutput

TEAM_ID = "TEAM000001"
BUNDLE_ID_DIS = "com.example.myapp"
BUNDLE_ID_DEV = "com.example.myapp.dev"

WORKSPACE_LIST_OUTPUT = (
    "Command line invocation:\n"
    "    /Applications/Xcode.app/Contents/Developer/usr/bin/xcodebuild -list "
    "-workspace MyApp.xcworkspace\n"
    "\n"
    "Information about workspace \"MyApp\":\n"
    "    Schemes:\n"
    "        MyApp\n"
    "        MyApp-Dev\n"
    "        Pods-MyApp\n"
    "\n"
)

PROJECT_LIST_OUTPUT = (
    "Information about project \"MyApp\":\n"
    "    Targets:\n"
    "        MyApp\n"
    "        MyAppTests\n"
    "\n"
    "    Build Configurations:\n"
    "        Debug\n"
    "        Release\n"
    "\n"
    "    If no build configuration is specified and -scheme is not passed "
    "then \"Release\" is used.\n"
    "\n"
    "    Schemes:\n"
    "        MyApp\n"
    "        MyApp Staging\n"
)


def settings_output(bundle_id: str | None, team_id: str | None = None) -> str:
    """Render a minimal ``-showBuildSettings`` dump."""
    lines = [
        "Build settings for action build and target MyApp:",
        "    ACTION = build",
    ]
    if team_id is not None:
        lines.append(f"    DEVELOPMENT_TEAM = {team_id}")
    if bundle_id is not None:
        lines.append(f"    PRODUCT_BUNDLE_IDENTIFIER = {bundle_id}")
    lines.append("    PRODUCT_NAME = MyApp")
    return "\n".join(lines) + "\n"


class FakeRunner:
    """Scripted stand-in for ``lanedesk.process.run_process``.

    Attributes:
        calls: Every argv received, in order.
        cwds: The ``cwd`` of every call, in order.
        list_output: Returned for ``xcodebuild -list``.
        settings: Per-scheme output for ``-showBuildSettings``. Schemes not
            present exit with status 65.
        outputs: Exact-argv overrides checked before anything else.
        spawn_error: When set, every call raises ``ToolInvocationError``.
    """

    def __init__(self) -> None:
        self.calls: list[list[str]] = []
        self.cwds: list[object] = []
        self.list_output = ProcessOutput(0, "", "")
        self.settings: dict[str, ProcessOutput] = {}
        self.outputs: dict[tuple[str, ...], ProcessOutput] = {}
        self.spawn_error: str | None = None

    def set_settings(
        self, scheme: str, bundle_id: str | None, team_id: str | None = None,
    ) -> None:
        self.settings[scheme] = ProcessOutput(0, settings_output(bundle_id, team_id), "")

    def __call__(self, argv, cwd=None, timeout=None) -> ProcessOutput:
        argv = list(argv)
        self.calls.append(argv)
        self.cwds.append(cwd)
        if self.spawn_error is not None:
            raise ToolInvocationError(argv, self.spawn_error)
        if tuple(argv) in self.outputs:
            return self.outputs[tuple(argv)]
        if "-list" in argv:
            return self.list_output
        if "-showBuildSettings" in argv:
            scheme = argv[argv.index("-scheme") + 1]
            return self.settings.get(
                scheme, ProcessOutput(65, "", f"xcodebuild: error: Scheme {scheme} not found"),
            )
        return ProcessOutput(127, "", "unexpected command")

    def settings_calls(self) -> list[list[str]]:
        return [c for c in self.calls if "-showBuildSettings" in c]


