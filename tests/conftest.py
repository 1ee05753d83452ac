from collections.abc import Mapping, Sequence

import pytest

from protogen.runner import CommandResult


class FakeRunner:
    """Records commands instead of executing them."""

    def __init__(self, failures: Mapping[str, int] | None = None) -> None:
        # Maps a substring of the joined command line to the exit code to return
        self.failures = dict(failures or {})
        self.calls: list[tuple[str, list[str], dict[str, str] | None]] = []

    def run(
        self,
        program: str,
        args: Sequence[str],
        env: Mapping[str, str] | None = None,
    ) -> CommandResult:
        self.calls.append((program, list(args), dict(env) if env is not None else None))
        command_line = " ".join([program, *args])
        returncode = 0
        for needle, code in self.failures.items():
            if needle in command_line:
                returncode = code
                break
        return CommandResult(program=program, args=list(args), returncode=returncode)

    def programs(self) -> list[str]:
        return [program for program, _, _ in self.calls]


@pytest.fixture
def fake_runner():
    return FakeRunner()


@pytest.fixture
def proto_tree(tmp_path):
    """Tree with a/x.proto, a/b/y.proto and c/readme.md."""
    (tmp_path / "a" / "b").mkdir(parents=True)
    (tmp_path / "c").mkdir()
    (tmp_path / "a" / "x.proto").write_text('syntax = "proto3";\n')
    (tmp_path / "a" / "b" / "y.proto").write_text('syntax = "proto3";\n')
    (tmp_path / "c" / "readme.md").write_text("# readme\n")
    return tmp_path
