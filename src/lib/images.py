"""
Image URL resolution

Rewrites markdown image references as HTML <img> elements whose relative
paths are replaced by absolute repository URLs, so images keep working
after the markdown is relocated (e.g. into packaged documentation).

    ![alt](images/logo.png | width=80 height=20)

becomes

    <img src="https://raw.githubusercontent.com/USER/REPO/master/images/logo.png" alt="alt" width="80" height="20">
"""

import re
from pathlib import Path
from typing import List, Union

from ..config.settings import AppSettings
from .paths import path_resolve, path_inProject
from .renderer import comment

IMAGE_REGEXP = re.compile(r'!\[([^\[]+)\]\(([^)]+)\)')
ATTRIBUTE_SEPARATOR = re.compile(r'\s?\|\s?')


def attributes_format(attributes_text: str) -> str:
    """Turn 'a=1 b=2' into ' a="1" b="2"'"""
    formatted = ['']
    for attribute in attributes_text.split():
        name, _, value = attribute.partition('=')
        formatted.append(f'{name}="{value}"')
    return ' '.join(formatted)


def imageUrl_make(template_path: Union[str, Path], image_path: str, settings: AppSettings) -> str:
    """
    Absolute URL for an image cited from a template.

    URLs (anything starting with ``http``) are kept as they are.

    Raises:
        MissingRequiredConfiguration: If repo_user or repo_name is unset
    """
    if image_path.startswith('http'):
        return image_path
    absolute = path_resolve(template_path, image_path)
    relative = path_inProject(absolute, settings.root)
    return '/'.join([settings.imageUrlBase_make().rstrip('/'), Path(relative).as_posix()])


def images_resolve(
    template_path: Union[str, Path],
    input_lines: List[str],
    output_lines: List[str],
    settings: AppSettings,
) -> None:
    """
    Append input lines to the output buffer with image references resolved.

    Lines without images pass through unchanged. Unless pristine, each
    rewritten line is bracketed by markers quoting the original line.
    """
    for input_line in input_lines:
        images = IMAGE_REGEXP.findall(input_line)
        if not images:
            output_lines.append(input_line)
            continue
        quoted = input_line.rstrip('\r\n')
        if not settings.pristine:
            output_lines.append(comment(f" >>>>>> BEGIN RESOLVED IMAGES: INPUT-LINE '{quoted}' "))
        output_line = input_line
        for alt_text, path_and_attributes in images:
            parts = ATTRIBUTE_SEPARATOR.split(path_and_attributes, maxsplit=1)
            image_path = parts[0]
            attributes = attributes_format(parts[1]) if len(parts) > 1 else ''
            url = imageUrl_make(template_path, image_path, settings)
            element = f'<img src="{url}" alt="{alt_text}"{attributes}>'
            output_line = IMAGE_REGEXP.sub(lambda _: element, output_line, count=1)
        output_lines.append(output_line)
        if not settings.pristine:
            output_lines.append(comment(f" <<<<<< END RESOLVED IMAGES: INPUT-LINE '{quoted}' "))
