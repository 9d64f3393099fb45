"""App — the root of a catalogsmith program and the entry point to synthesis."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import TYPE_CHECKING

from catalogsmith.config import SynthConfig
from catalogsmith.constructs.base import ConstructError
from catalogsmith.core.session import SynthesisSession
from catalogsmith.models.assembly import CloudAssembly, StackArtifact

if TYPE_CHECKING:
    from catalogsmith.constructs.stack import Stack

logger = logging.getLogger(__name__)

MANIFEST_FILE = "manifest.json"
MANIFEST_VERSION = "1.0.0"


class App:
    """Holds the stacks of one deployment unit.

    Every call to ``synth()`` is an independent synthesis pass with its
    own ``SynthesisSession``; artifact deduplication never carries over
    from one pass to the next.

    Parameters
    ----------
    outdir:
        Assembly output directory. Defaults to ``config.outdir``.
    config:
        Synthesis settings. Uses environment-driven defaults if not provided.
    """

    def __init__(
        self,
        outdir: Path | str | None = None,
        config: SynthConfig | None = None,
    ) -> None:
        self.config = config or SynthConfig()
        self.outdir = Path(outdir) if outdir is not None else self.config.outdir
        self._stacks: dict[str, Stack] = {}

    def _register(self, stack: Stack) -> None:
        if stack.node_id in self._stacks:
            raise ConstructError(f"There is already a stack with id {stack.node_id!r}")
        self._stacks[stack.node_id] = stack

    @property
    def stacks(self) -> list[Stack]:
        return list(self._stacks.values())

    def synth(self) -> CloudAssembly:
        """Run one synthesis pass and write the cloud assembly to ``outdir``.

        Writes ``<stack>.template.json`` per stack, every packaged artifact,
        and ``manifest.json``.
        """
        with SynthesisSession(self.outdir, self.config) as session:
            stacks: list[StackArtifact] = []
            for stack in self.stacks:
                template = stack.render(session)
                session.store.write_text(
                    stack.template_file, json.dumps(template, indent=1) + "\n"
                )
                stacks.append(
                    StackArtifact(
                        stack_name=stack.stack_name,
                        template_file=stack.template_file,
                        template=template,
                        assets=session.manifest_entries(stack.path),
                    )
                )

            assets = session.manifest_entries()
            manifest = {
                "version": MANIFEST_VERSION,
                "stacks": {
                    s.stack_name: {
                        "templateFile": s.template_file,
                        "assets": [a.id for a in s.assets],
                    }
                    for s in stacks
                },
                "assets": {
                    a.id: a.model_dump(mode="json", exclude={"id"}) for a in assets
                },
            }
            session.store.write_text(
                MANIFEST_FILE, json.dumps(manifest, indent=1, sort_keys=True) + "\n"
            )

        logger.info(
            "Synthesized %d stack(s) with %d unique artifact(s) into %s.",
            len(stacks), len(assets), self.outdir,
        )
        return CloudAssembly(outdir=self.outdir, stacks=stacks, assets=assets)
