"""Unit tests for psscript.builder."""

import itertools

import pytest

from psscript import ExecutionPolicy, PsScript, PsScriptBuilder, PsScriptConfig


class TestDefaults:
    def test_default_args(self):
        assert PsScriptBuilder().build().args == ("-NoProfile", "-NonInteractive", "-Command", "-")

    def test_default_hints(self):
        script = PsScriptBuilder().build()
        assert script.hidden is True
        assert script.print_commands is False

    def test_build_returns_descriptor(self):
        assert isinstance(PsScriptBuilder().build(), PsScript)


class TestFlags:
    @pytest.mark.parametrize(
        "no_profile,non_interactive", list(itertools.product([True, False], repeat=2))
    )
    def test_args_always_end_with_payload(self, no_profile, non_interactive):
        args = (
            PsScriptBuilder()
            .no_profile(no_profile)
            .non_interactive(non_interactive)
            .build()
            .args
        )
        assert args[-2:] == ("-Command", "-")

    def test_no_profile_false(self):
        assert PsScriptBuilder().no_profile(False).build().args == (
            "-NonInteractive",
            "-Command",
            "-",
        )

    def test_non_interactive_false(self):
        assert PsScriptBuilder().non_interactive(False).build().args == (
            "-NoProfile",
            "-Command",
            "-",
        )

    def test_all_flags_off_leaves_payload_only(self):
        script = PsScriptBuilder().no_profile(False).non_interactive(False).build()
        assert script.args == ("-Command", "-")

    def test_setting_twice_is_idempotent(self):
        once = PsScriptBuilder().no_profile(True).build()
        twice = PsScriptBuilder().no_profile(True).no_profile(True).build()
        assert once == twice

    def test_hidden_and_print_commands_only_change_hints(self):
        default = PsScriptBuilder().build()
        script = PsScriptBuilder().print_commands(True).hidden(False).build()
        assert script.args == default.args
        assert script.hidden is False
        assert script.print_commands is True


class TestExecutionPolicy:
    def test_bypass_scenario(self):
        script = PsScriptBuilder().execution_policy(ExecutionPolicy.BYPASS).build()
        assert script.args == (
            "-ExecutionPolicy",
            "Bypass",
            "-NoProfile",
            "-NonInteractive",
            "-Command",
            "-",
        )

    @pytest.mark.parametrize("policy", list(ExecutionPolicy))
    def test_flag_immediately_precedes_token(self, policy):
        args = list(PsScriptBuilder().execution_policy(policy).build().args)
        index = args.index("-ExecutionPolicy")
        assert args[index + 1] == policy.value
        assert index + 1 < args.index("-NoProfile")
        assert index + 1 < args.index("-NonInteractive")

    def test_tokens(self):
        assert [p.value for p in ExecutionPolicy] == [
            "AllSigned",
            "Bypass",
            "Default",
            "RemoteSigned",
            "Restricted",
            "Undefined",
            "Unrestricted",
        ]

    def test_unset_never_emits_flag(self):
        assert "-ExecutionPolicy" not in PsScriptBuilder().no_profile(False).build().args

    def test_later_policy_overwrites_earlier(self):
        args = (
            PsScriptBuilder()
            .execution_policy(ExecutionPolicy.RESTRICTED)
            .execution_policy(ExecutionPolicy.ALL_SIGNED)
            .build()
            .args
        )
        assert args.count("-ExecutionPolicy") == 1
        assert "AllSigned" in args
        assert "Restricted" not in args

    def test_policy_without_other_flags(self):
        args = (
            PsScriptBuilder()
            .no_profile(False)
            .non_interactive(False)
            .execution_policy(ExecutionPolicy.UNRESTRICTED)
            .build()
            .args
        )
        assert args == ("-ExecutionPolicy", "Unrestricted", "-Command", "-")


class TestImmutability:
    def test_setters_return_new_builder(self):
        base = PsScriptBuilder()
        changed = base.no_profile(False)
        assert changed is not base
        assert base.build().args[0] == "-NoProfile"

    def test_builder_is_reusable(self):
        builder = PsScriptBuilder().execution_policy(ExecutionPolicy.BYPASS)
        assert builder.build() == builder.build()

    def test_descriptor_is_frozen(self):
        script = PsScriptBuilder().build()
        with pytest.raises(AttributeError):
            script.hidden = False  # type: ignore[misc]


class TestFromConfig:
    def test_defaults_match_plain_builder(self):
        assert PsScriptBuilder.from_config(PsScriptConfig()).build() == PsScriptBuilder().build()

    def test_config_values_are_applied(self):
        config = PsScriptConfig(
            no_profile=False,
            hidden=False,
            print_commands=True,
            execution_policy=ExecutionPolicy.REMOTE_SIGNED,
        )
        script = PsScriptBuilder.from_config(config).build()
        assert script.args == (
            "-ExecutionPolicy",
            "RemoteSigned",
            "-NonInteractive",
            "-Command",
            "-",
        )
        assert script.hidden is False
        assert script.print_commands is True
