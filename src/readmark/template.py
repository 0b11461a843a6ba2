# topmark:header:start
#
#   project      : ReadMark
#   file         : template.py
#   file_relpath : src/readmark/template.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""README template lookup and rendering.

A template is plain text with ``{{...}}`` placeholders:

* ``{{readme}}`` (required): the rendered crate documentation;
* ``{{crate}}``: the package name;
* ``{{license}}``: the package license;
* ``{{version}}``: the package version.

When the title or license line is requested but the template has no
``{{crate}}`` / ``{{license}}`` placeholder, the line is added around the
template, exactly as it would be without a template.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from readmark.config.logging import get_logger
from readmark.constants import (
    DEFAULT_TEMPLATE_NAME,
    PLACEHOLDER_CRATE,
    PLACEHOLDER_LICENSE,
    PLACEHOLDER_README,
    PLACEHOLDER_VERSION,
)
from readmark.errors import TemplateError

if TYPE_CHECKING:
    from readmark.config.logging import ReadmarkLogger

logger: ReadmarkLogger = get_logger(__name__)


def prepend_title(readme: str, crate_name: str) -> str:
    """Prepend the ``# <crate>`` title line and a blank line."""
    return f"# {crate_name}\n\n{readme}"


def append_license(readme: str, license_name: str) -> str:
    """Append a blank line and the ``License: <license>`` line."""
    return f"{readme}\n\nLicense: {license_name}"


def render_template(
    template: str,
    readme: str,
    *,
    crate_name: str,
    license_name: str | None = None,
    version: str | None = None,
    add_title: bool = True,
    add_license: bool = True,
) -> str:
    """Substitute the README placeholders in ``template``.

    Args:
        template (str): Template text; trailing newlines are ignored.
        readme (str): The rendered documentation body.
        crate_name (str): Value for ``{{crate}}``.
        license_name (str | None): Value for ``{{license}}``.
        version (str | None): Value for ``{{version}}``.
        add_title (bool): Prepend a title when the template has no ``{{crate}}``.
        add_license (bool): Append a license line when the template has no
            ``{{license}}``.

    Returns:
        str: The rendered document.

    Raises:
        TemplateError: If ``{{readme}}`` is missing, or a placeholder has no value.
    """
    result: str = template.rstrip("\n")

    if PLACEHOLDER_README not in result:
        raise TemplateError(f"Missing `{PLACEHOLDER_README}` in template")

    if add_title and PLACEHOLDER_CRATE not in result:
        logger.debug("Template has no %s, prepending title", PLACEHOLDER_CRATE)
        result = prepend_title(result, crate_name)

    if add_license and PLACEHOLDER_LICENSE not in result:
        if license_name is None:
            raise TemplateError("There is no license in Cargo.toml")
        logger.debug("Template has no %s, appending license", PLACEHOLDER_LICENSE)
        result = append_license(result, license_name)

    if PLACEHOLDER_LICENSE in result:
        if license_name is None:
            raise TemplateError(
                f"`{PLACEHOLDER_LICENSE}` was found in template but no license was provided"
            )
        result = result.replace(PLACEHOLDER_LICENSE, license_name)

    if PLACEHOLDER_VERSION in result:
        if version is None:
            raise TemplateError(
                f"`{PLACEHOLDER_VERSION}` was found in template but no version was provided"
            )
        result = result.replace(PLACEHOLDER_VERSION, version)

    result = result.replace(PLACEHOLDER_CRATE, crate_name)
    # Substitute the body last so placeholders inside the docs stay verbatim.
    return result.replace(PLACEHOLDER_README, readme)


def get_template_path(
    project_root: Path,
    template: Path | str | None = None,
) -> Path | None:
    """Return the template to use, if any.

    An explicit template (relative to ``project_root``) must exist. Otherwise,
    ``README.tpl`` in the project root is used when present.

    Raises:
        TemplateError: If an explicit template does not exist.
    """
    if template is not None:
        path: Path = Path(template)
        if not path.is_absolute():
            path = project_root / path
        if not path.is_file():
            raise TemplateError(f"Template file not found: '{template}'", missing=True)
        return path

    default: Path = project_root / DEFAULT_TEMPLATE_NAME
    if default.is_file():
        logger.debug("Using default template %s", default)
        return default
    return None
