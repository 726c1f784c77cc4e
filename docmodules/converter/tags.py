"""
Reading and stripping the module tags from doc comments.
"""

from typing import Optional

from ..reflections import Comment, Reflection
from ..plugin_config import PluginConfig


def definition_name(comment: Optional[Comment], tag_name: Optional[str] = None) -> Optional[str]:
    """
    Logical module name defined by a comment.

    The tag text runs to the end of the comment block, so only its first
    line is the name.

    Returns:
        The trimmed name, or None if the tag is absent or blank
    """
    if comment is None:
        return None
    tag = comment.get_tag(tag_name or PluginConfig().module_definition_tag)
    if tag is None or not tag.text:
        return None
    name = tag.text.splitlines()[0].strip()
    return name or None


def strip_module_tag(owner, tag_name: Optional[str] = None) -> Optional[str]:
    """
    Return the module named by owner's @module tag and remove the tag.

    owner is a Reflection or a Signature. If removing the tag leaves the
    comment without descriptive text, the comment is removed as well. A
    blank tag is left in place and None is returned.
    """
    comment = owner.comment
    if comment is None:
        return None

    tag_name = tag_name or PluginConfig().module_tag
    tag = comment.get_tag(tag_name)
    if tag is None or not tag.text.strip():
        return None

    module_name = tag.text.strip()
    comment.remove_tag(tag_name)
    if not comment.has_description():
        owner.comment = None
    return module_name


def tagged_module(reflection: Reflection, tag_name: Optional[str] = None) -> Optional[str]:
    """
    Module a declaration is tagged with, stripping the tag that supplied it.

    Function reflections carry their comments on their call signatures; the
    first signature with a usable tag wins.
    """
    if not reflection.is_exported or reflection.is_alias:
        return None

    if reflection.kind.is_function_like:
        for signature in reflection.signatures:
            module_name = strip_module_tag(signature, tag_name)
            if module_name is not None:
                return module_name
        return None

    return strip_module_tag(reflection, tag_name)
