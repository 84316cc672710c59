"""Building the rust-project.json file that lets rust-analyzer understand the exercises."""

from __future__ import annotations

import json
import os
import subprocess
from dataclasses import asdict, dataclass, field
from pathlib import Path

PROJECT_FILE = "./rust-project.json"


@dataclass
class Crate:
    """One exercise file described as a standalone crate."""

    root_module: str
    edition: str = "2021"
    deps: list[str] = field(default_factory=list)
    cfg: list[str] = field(default_factory=lambda: ["test"])


@dataclass
class RustAnalyzerProject:
    """Contents of rust-project.json and the means to fill them in."""

    sysroot_src: str = ""
    crates: list[Crate] = field(default_factory=list)

    def to_json(self) -> str:
        """Serialise the project as compact JSON."""
        data = {
            "sysroot_src": self.sysroot_src,
            "crates": [asdict(crate) for crate in self.crates],
        }
        return json.dumps(data, separators=(",", ":"), ensure_ascii=False)

    def write_to_disk(self, path: str | os.PathLike = PROJECT_FILE) -> None:
        """Write the project file; raises OSError when that fails."""
        Path(path).write_text(self.to_json(), encoding="utf-8")

    def path_to_json(self, path: str | os.PathLike) -> None:
        """Add a crate for the path when the text after its first dot is "rs"."""
        text = os.fspath(path)
        _, dot, extension = text.partition(".")
        if dot and extension == "rs":
            # The "test" cfg lets rust-analyzer work inside #[test] blocks.
            self.crates.append(Crate(root_module=text))

    def exercises_to_json(self, root: str | os.PathLike = "./exercises") -> None:
        """Add a crate for every .rs file found below the exercises folder."""
        for path in sorted(Path(root).glob("**/*")):
            self.path_to_json(str(path))

    def get_sysroot_src(self) -> None:
        """Find the standard library sources, from RUST_SRC_PATH or from rustc."""
        env_path = os.environ.get("RUST_SRC_PATH")
        if env_path is not None:
            self.sysroot_src = env_path
            return

        result = subprocess.run(["rustc", "--print", "sysroot"], capture_output=True)
        text = (result.stdout or b"").decode("utf-8", errors="replace")
        tokens = text.split()
        toolchain = tokens[0] if tokens else text

        print(f"Determined toolchain: {toolchain}\n")

        self.sysroot_src = str(Path(toolchain) / "lib" / "rustlib" / "src" / "rust" / "library")