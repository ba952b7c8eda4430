"""Shared fixtures: build small _bmad installations on disk."""

from __future__ import annotations

from pathlib import Path
from unittest.mock import patch

import pytest

HELP_HEADER = (
    "module,phase,name,code,sequence,workflow-file,command,required,agent-name,"
    "agent-command,agent-display-name,agent-title,options,description,output-location,outputs"
)
AGENT_HEADER = (
    "name,displayName,title,icon,capabilities,role,identity,communicationStyle,principles,module,path"
)
WORKFLOW_HEADER = "name,description,module,path"
TASK_TOOL_HEADER = "name,displayName,description,module,path,standalone"

HELP_CSV = "\n".join(
    [
        HELP_HEADER,
        "bmm,2-planning,Create PRD,CP,10,_bmad/bmm/workflows/prd/workflow.md,bmad-bmm-create-prd,"
        'true,pm,bmad:bmm:agent:pm,John,📋 Product Manager,,"Create PRD",,prd.md',
        "bmm,3-solutioning,Create Architecture,CA,20,_bmad/bmm/workflows/arch/workflow.yaml,"
        "bmad-bmm-create-architecture,true,architect,,,,,Design the architecture,,",
        "core,,Brainstorm,BS,,_bmad/core/tasks/brainstorm.xml,bmad-brainstorming,false,,,,,,"
        '"Facilitate a brainstorming session, with ""techniques""",,',
        "bmm,anytime,Write Document,WD,,,,false,tech-writer,,Paige,,,Agent-only capability,,",
    ]
)

AGENT_CSV = "\n".join(
    [
        AGENT_HEADER,
        'pm,John,Product Manager,📋,"PRDs, planning",Product lead,,,,bmm,_bmad/bmm/agents/pm.md',
        "bmad-master,BMad Master,Master Orchestrator,🧙,,,,,,core,_bmad/core/agents/bmad-master.md",
    ]
)

WORKFLOW_CSV = "\n".join(
    [
        WORKFLOW_HEADER,
        "create-prd,Create a PRD,bmm,_bmad/bmm/workflows/prd/workflow.md",
        "create-architecture,Design the architecture,bmm,_bmad/bmm/workflows/arch/workflow.yaml",
    ]
)

TASK_CSV = "\n".join(
    [
        TASK_TOOL_HEADER,
        "index-docs,Index Docs,Index a docs folder,core,_bmad/core/tasks/index-docs.xml,true",
        # same slash name as a catalog row: the catalog must win
        "create-prd,Create PRD Task,Task flavoured PRD,bmm,_bmad/bmm/tasks/prd.xml,true",
    ]
)

TOOL_CSV = "\n".join(
    [
        TASK_TOOL_HEADER,
        "shard-doc,Shard Document,Split a large document,core,_bmad/core/tools/shard-doc.xml,true",
        # same slash name as a task row: the task (earlier kind) must win
        "index-docs,Index Docs Tool,Tool flavoured index,core,_bmad/core/tools/index.xml,true",
    ]
)


def write_install(
    root: Path,
    *,
    help_csv: str | None = HELP_CSV,
    agent_csv: str | None = AGENT_CSV,
    workflow_csv: str | None = WORKFLOW_CSV,
    task_csv: str | None = TASK_CSV,
    tool_csv: str | None = TOOL_CSV,
    modules: tuple[str, ...] = ("bmm", "core"),
) -> Path:
    """Create ``root/_bmad`` with a _config dir, manifests and module dirs."""
    bmad_dir = root / "_bmad"
    config_dir = bmad_dir / "_config"
    config_dir.mkdir(parents=True)
    for name, content in (
        ("bmad-help.csv", help_csv),
        ("agent-manifest.csv", agent_csv),
        ("workflow-manifest.csv", workflow_csv),
        ("task-manifest.csv", task_csv),
        ("tool-manifest.csv", tool_csv),
    ):
        if content is not None:
            (config_dir / name).write_text(content + "\n", encoding="utf-8")
    for module in modules:
        (bmad_dir / module).mkdir()
    return bmad_dir


@pytest.fixture
def bmad_workspace(tmp_path):
    """A workspace root with a complete _bmad installation."""
    write_install(tmp_path)
    return tmp_path


def unsearchable(*paths: Path):
    """Patch ``Path.is_dir`` to raise EACCES for *paths*, as pathlib does on 3.10-3.12."""
    denied = {str(p) for p in paths}
    real_is_dir = Path.is_dir

    def _is_dir(self, *args, **kwargs):
        if str(self) in denied:
            raise PermissionError(13, "Permission denied", str(self))
        return real_is_dir(self, *args, **kwargs)

    return patch.object(Path, "is_dir", _is_dir)
