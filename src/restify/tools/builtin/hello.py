"""HelloTool — a zero-argument greeting, handy for smoke-testing a client."""

from __future__ import annotations

from restify.tools.models import ToolDescriptor, ToolOperation


class HelloTool:
    """Returns ``"hello world"``."""

    def operations(self) -> list[ToolOperation]:
        return [
            ToolOperation(
                descriptor=ToolDescriptor(
                    name="hello",
                    description="A simple hello tool that returns hello world string.",
                ),
                handler=self.hello,
            )
        ]

    def hello(self) -> str:
        return "hello world"
