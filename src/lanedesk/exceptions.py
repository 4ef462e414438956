"""lanedesk exception hierarchy.

All public exceptions inherit from LaneDeskError, giving callers a single
base class to catch when they want to handle any lanedesk-specific failure
without swallowing unrelated errors.

Discovery failures below the project-root precondition are never raised
to callers: a failed ``xcodebuild`` call degrades into an empty or absent
value instead.
"""


class LaneDeskError(Exception):
    """Base exception for all lanedesk errors."""


class ProjectNotFoundError(LaneDeskError):
    """Raised when the project root directory does not exist.

    This is the only hard precondition of a scan or identity resolution.
    It is checked before any filesystem walk or tool invocation.
    """

    def __init__(self, path: object) -> None:
        super().__init__(f"Project path not found: {path}")
        self.path = path


class ProfileError(LaneDeskError):
    """Raised when a project profile cannot be read, parsed, or updated.

    Covers a missing ``profile.json``, malformed JSON, fields with the
    wrong type, and unknown field names passed to ``set_field``.
    """


class LaneError(LaneDeskError):
    """Raised when a fastlane lane cannot be started.

    Covers invalid lane names and failures to spawn the lane process.
    A lane that runs and exits non-zero is not an error; it is reported
    through ``LaneRunResult``.
    """


class ToolInvocationError(LaneDeskError):
    """Raised when an external command cannot be spawned or times out.

    The discovery layer catches this and treats the affected value as
    absent.
    """

    def __init__(self, argv: list[str], reason: str) -> None:
        super().__init__(f"{argv[0] if argv else '<empty>'}: {reason}")
        self.argv = argv
        self.reason = reason
