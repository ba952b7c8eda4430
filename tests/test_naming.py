"""Tests for the slash-name / CLI-syntax codec and pattern detection."""

from __future__ import annotations

import pytest

from bmadkit.registry.naming import (
    agent_file_slash_name,
    agent_slash_name,
    classify_execution_pattern,
    has_root_prefix,
    prompt_file_slash_name,
    task_slash_name,
    to_external_name,
    to_internal_syntax,
)


class TestToExternalName:
    def test_replaces_every_colon(self):
        assert to_external_name("bmad:bmm:create-prd") == "bmad-bmm-create-prd"

    def test_agent(self):
        assert to_external_name("bmad:agent:bmm:pm") == "bmad-agent-bmm-pm"

    def test_no_colons(self):
        assert to_external_name("plain") == "plain"


class TestToInternalSyntax:
    def test_module_command(self):
        assert to_internal_syntax("bmad-bmm-create-prd") == "bmad:bmm:create-prd"

    def test_leading_slash_stripped(self):
        assert to_internal_syntax("/bmad-bmm-create-prd") == "bmad:bmm:create-prd"

    def test_module_agent(self):
        assert to_internal_syntax("bmad-agent-bmm-pm") == "bmad:agent:bmm:pm"

    def test_module_agent_hyphenated_name(self):
        assert to_internal_syntax("bmad-agent-bmm-ux-designer") == "bmad:agent:bmm:ux-designer"

    def test_core_agent(self):
        assert to_internal_syntax("bmad-agent-master") == "bmad:agent:master"

    def test_core_command(self):
        assert to_internal_syntax("bmad-help") == "bmad:help"

    def test_non_bmad_passthrough(self):
        assert to_internal_syntax("other-tool-thing") == "other-tool-thing"

    def test_non_bmad_passthrough_strips_slash(self):
        assert to_internal_syntax("/foo") == "foo"

    def test_bare_prefix(self):
        assert to_internal_syntax("bmad") == "bmad"

    def test_bare_agent_marker(self):
        assert to_internal_syntax("bmad-agent") == "bmad:agent"

    def test_hyphenated_core_agent_is_ambiguous(self):
        # module and name cannot be separated once dash-joined
        assert to_internal_syntax("bmad-agent-tech-writer") == "bmad:agent:tech:writer"

    def test_hyphenated_module_is_ambiguous(self):
        assert to_internal_syntax("bmad-my-mod-run") == "bmad:my:mod-run"

    @pytest.mark.parametrize(
        "cli",
        ["bmad:bmm:prd", "bmad:cis:brainstorm", "bmad:agent:bmm:pm", "bmad:help", "bmad:agent:pm"],
    )
    def test_round_trip_without_inner_dashes(self, cli):
        slash = to_external_name(cli)
        assert to_internal_syntax(slash) == cli
        assert to_external_name(to_internal_syntax(slash)) == slash


class TestClassifyExecutionPattern:
    def test_yaml(self):
        assert classify_execution_pattern("foo.yaml") == "yaml-workflow"

    def test_yml(self):
        assert classify_execution_pattern("a/b/workflow.yml") == "yaml-workflow"

    def test_xml(self):
        assert classify_execution_pattern("foo.xml") == "task"

    def test_md(self):
        assert classify_execution_pattern("foo.md") == "md-workflow"

    def test_no_extension(self):
        assert classify_execution_pattern("foo") == "md-workflow"

    def test_empty(self):
        assert classify_execution_pattern("") == "md-workflow"

    def test_uppercase_extension(self):
        assert classify_execution_pattern("FOO.YAML") == "yaml-workflow"


class TestSlashNameBuilders:
    def test_agent_core(self):
        assert agent_slash_name("master", "core") == "bmad-agent-master"
        assert agent_slash_name("master", "") == "bmad-agent-master"

    def test_agent_module(self):
        assert agent_slash_name("pm", "bmm") == "bmad-agent-bmm-pm"

    def test_task_core(self):
        assert task_slash_name("index-docs", "core") == "bmad-index-docs"

    def test_task_module(self):
        assert task_slash_name("shard", "bmm") == "bmad-bmm-shard"

    def test_has_root_prefix(self):
        assert has_root_prefix("bmad-help")
        assert has_root_prefix("bmad")
        assert not has_root_prefix("bmadx-help")
        assert not has_root_prefix("help")


class TestFileNames:
    def test_prompt_file(self):
        assert prompt_file_slash_name("bmad-bmm-create-prd.prompt.md") == "bmad-bmm-create-prd"

    def test_prompt_file_wrong_suffix(self):
        assert prompt_file_slash_name("bmad-bmm-create-prd.md") is None

    def test_prompt_file_wrong_prefix(self):
        assert prompt_file_slash_name("other.prompt.md") is None

    def test_agent_file_module_layout(self):
        assert agent_file_slash_name("bmad-bmm-agents-pm.agent.md") == (
            "bmad-bmm-agents-pm",
            "bmad-agent-bmm-pm",
        )

    def test_agent_file_hyphenated_name(self):
        assert agent_file_slash_name("bmad-bmm-agents-ux-designer.agent.md") == (
            "bmad-bmm-agents-ux-designer",
            "bmad-agent-bmm-ux-designer",
        )

    def test_agent_file_other_layout(self):
        assert agent_file_slash_name("bmad-master.agent.md") == ("bmad-master", None)

    def test_agent_file_not_bmad(self):
        assert agent_file_slash_name("helper.agent.md") is None
