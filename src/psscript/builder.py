"""Builder for PowerShell invocations."""

from dataclasses import dataclass, replace

from psscript.models import ExecutionPolicy, PsScriptConfig
from psscript.script import PsScript

# Tells PowerShell to read the script text from stdin.
PAYLOAD_ARGS = ("-Command", "-")


@dataclass(frozen=True)
class PsScriptBuilder:
    """Configure the options for running a script.

    Every option method returns a new builder, so instances can be shared and
    chained freely::

        script = PsScriptBuilder().no_profile(False).execution_policy(ExecutionPolicy.BYPASS).build()

    Defaults: ``no_profile``, ``non_interactive`` and ``hidden`` are on,
    ``print_commands`` is off and no execution policy is passed.
    """

    _args: tuple[str, ...] = PAYLOAD_ARGS
    _no_profile: bool = True
    _non_interactive: bool = True
    _hidden: bool = True
    _print_commands: bool = False
    _execution_policy: ExecutionPolicy | None = None

    @classmethod
    def from_config(cls, config: PsScriptConfig) -> "PsScriptBuilder":
        """Return a builder seeded with the option defaults from config."""
        builder = cls(
            _no_profile=config.no_profile,
            _non_interactive=config.non_interactive,
            _hidden=config.hidden,
            _print_commands=config.print_commands,
        )
        if config.execution_policy is not None:
            builder = builder.execution_policy(config.execution_policy)
        return builder

    def no_profile(self, flag: bool) -> "PsScriptBuilder":
        """Skip loading the user's PowerShell profile (``-NoProfile``)."""
        return replace(self, _no_profile=flag)

    def non_interactive(self, flag: bool) -> "PsScriptBuilder":
        """Never present an interactive prompt (``-NonInteractive``)."""
        return replace(self, _non_interactive=flag)

    def hidden(self, flag: bool) -> "PsScriptBuilder":
        """Start PowerShell without a console window.

        Only has an effect on Windows, where the process is created with
        ``CREATE_NO_WINDOW``. A no-op on every other platform.
        """
        return replace(self, _hidden=flag)

    def print_commands(self, flag: bool) -> "PsScriptBuilder":
        """Echo each script line to stdout before it is run."""
        return replace(self, _print_commands=flag)

    def execution_policy(self, policy: ExecutionPolicy) -> "PsScriptBuilder":
        """Pass ``-ExecutionPolicy <policy>``, replacing any earlier choice."""
        return replace(self, _execution_policy=ExecutionPolicy(policy))

    def build(self) -> PsScript:
        args = list(self._args)
        if self._non_interactive:
            args.insert(0, "-NonInteractive")
        if self._no_profile:
            args.insert(0, "-NoProfile")
        if self._execution_policy is not None:
            # Value first, flag last, so the flag ends up right before it.
            args.insert(0, self._execution_policy.value)
            args.insert(0, "-ExecutionPolicy")

        return PsScript(
            args=tuple(args),
            hidden=self._hidden,
            print_commands=self._print_commands,
        )
