"""FastAPI dependency injection for layout services."""

from typing import Annotated

from fastapi import Depends

from cutlayout.application import GenerateCutLayoutCommand


def get_generate_command() -> GenerateCutLayoutCommand:
    """Dependency for GenerateCutLayoutCommand."""
    return GenerateCutLayoutCommand()


# Type aliases for cleaner endpoint signatures
GenerateCommandDep = Annotated[GenerateCutLayoutCommand, Depends(get_generate_command)]
