"""
Project Writer
==============

Writes rendered artifacts to disk. The renderer itself never touches the
filesystem; this module is the caller that does.

Every artifact is rendered before the first file is written, so a render
failure (for example an unsupported language version) leaves the output
directory untouched.
"""

from pathlib import Path
from typing import Dict, List, Optional, Union

from scaffoldr_common import ScaffoldrError, get_logger
from scaffoldr_schema import BuildDescriptor

from ..templates.renderer import TemplateRenderer, get_renderer

logger = get_logger(__name__)


def plan_project(
    descriptor: BuildDescriptor,
    output_dir: Union[str, Path],
    project_name: Optional[str] = None,
    include_dockerfile: bool = False,
    renderer: Optional[TemplateRenderer] = None,
) -> Dict[Path, str]:
    """
    Render every artifact and map it to its destination path.

    Raises:
        UnsupportedVersionError: If the descriptor cannot be rendered
    """
    renderer = renderer or get_renderer()
    rendered = renderer.render_all(
        descriptor, project_name=project_name, include_dockerfile=include_dockerfile
    )
    root = Path(output_dir)
    return {root / file_name: content for file_name, content in rendered.items()}


def write_project(
    descriptor: BuildDescriptor,
    output_dir: Union[str, Path],
    project_name: Optional[str] = None,
    include_dockerfile: bool = False,
    force: bool = False,
    renderer: Optional[TemplateRenderer] = None,
) -> List[Path]:
    """
    Render and write the build files for a descriptor.

    Args:
        descriptor: Descriptor to render
        output_dir: Directory receiving the files (created if missing)
        project_name: Also write a settings script naming the root project
        include_dockerfile: Also write a Dockerfile
        force: Overwrite existing files
        renderer: Renderer to use (defaults to the global renderer)

    Returns:
        Paths written, in render order

    Raises:
        UnsupportedVersionError: If the descriptor cannot be rendered
        ScaffoldrError: If files exist and force is False, or writing fails
    """
    planned = plan_project(
        descriptor,
        output_dir,
        project_name=project_name,
        include_dockerfile=include_dockerfile,
        renderer=renderer,
    )

    existing = [path for path in planned if path.exists()]
    if existing and not force:
        raise ScaffoldrError(
            "Refusing to overwrite existing files (use force=True): "
            + ", ".join(str(path) for path in existing)
        )

    written: List[Path] = []
    try:
        Path(output_dir).mkdir(parents=True, exist_ok=True)
        for path, content in planned.items():
            path.write_text(content, encoding="utf-8", newline="\n")
            written.append(path)
            logger.info("Wrote build file", path=str(path), size=len(content))
    except OSError as e:
        raise ScaffoldrError(f"Failed to write project files to {output_dir}: {e}") from e

    return written
