"""
Conversion of a project tree to and from plain dictionaries (JSON shape).
"""

from typing import Any, Dict, List, Optional

from .reflections import (
    Comment,
    CommentTag,
    ProjectReflection,
    Reflection,
    ReflectionGroup,
    ReflectionKind,
    Signature,
)


class SerializationError(ValueError):
    """Raised when a dictionary does not describe a valid project tree."""


def comment_to_dict(comment: Comment) -> Dict[str, Any]:
    result = {}
    if comment.short_text:
        result['shortText'] = comment.short_text
    if comment.text:
        result['text'] = comment.text
    if comment.tags:
        result['tags'] = [{'tag': tag.tag_name, 'text': tag.text} for tag in comment.tags]
    return result


def _expect_dict(value: Any, what: str) -> Dict[str, Any]:
    if not isinstance(value, dict):
        raise SerializationError(f"{what} must be a JSON object, got {type(value).__name__}")
    return value


def comment_from_dict(data: Dict[str, Any]) -> Comment:
    _expect_dict(data, "Comment")
    tags = [CommentTag(tag['tag'], tag.get('text', ''))
            for tag in (_expect_dict(item, "Comment tag") for item in data.get('tags', []))]
    return Comment(data.get('shortText', ''), data.get('text', ''), tags)


def reflection_to_dict(project: ProjectReflection, reflection: Reflection) -> Dict[str, Any]:
    result: Dict[str, Any] = {
        'id': reflection.id,
        'name': reflection.name,
        'kind': reflection.kind.value,
        'flags': {'isExported': True} if reflection.is_exported else {},
    }

    if reflection.comment is not None:
        result['comment'] = comment_to_dict(reflection.comment)

    if reflection.alias_of is not None:
        result['aliasOf'] = reflection.alias_of

    if reflection.signatures:
        signatures = []
        for signature in reflection.signatures:
            signature_dict = {'name': signature.name}
            if signature.comment is not None:
                signature_dict['comment'] = comment_to_dict(signature.comment)
            signatures.append(signature_dict)
        result['signatures'] = signatures

    if reflection.children:
        result['children'] = [reflection_to_dict(project, child)
                              for child in project.children_of(reflection)]

    if reflection.groups:
        result['groups'] = [
            {'title': group.title, 'kind': group.kind.value, 'children': list(group.children)}
            for group in reflection.groups
        ]

    return result


def project_to_dict(project: ProjectReflection) -> Dict[str, Any]:
    return reflection_to_dict(project, project)


def project_from_dict(data: Dict[str, Any]) -> ProjectReflection:
    """
    Build a project tree from its dictionary form.

    Groups missing from the input are derived from the children.

    Raises:
        SerializationError: If the input is not a valid project tree
    """
    if not isinstance(data, dict):
        raise SerializationError("Project must be a JSON object")
    if data.get('kind', ReflectionKind.PROJECT.value) != ReflectionKind.PROJECT.value:
        raise SerializationError(f"Root reflection must be a project, got {data.get('kind')!r}")

    project = ProjectReflection(data.get('name', 'project'))
    try:
        _load_common(project, data)
        _load_children(project, project, data.get('children', []))
        _load_groups(project, project, data)
    except (AttributeError, KeyError, TypeError, ValueError) as e:
        if isinstance(e, SerializationError):
            raise
        raise SerializationError(f"Invalid project data: {e!r}") from e
    return project


def _load_common(reflection: Reflection, data: Dict[str, Any]):
    if data.get('comment') is not None:
        reflection.comment = comment_from_dict(data['comment'])
    flags = _expect_dict(data.get('flags', {}), f"Flags of #{reflection.id}")
    reflection.is_exported = bool(flags.get('isExported', False))
    reflection.alias_of = data.get('aliasOf')
    reflection.signatures = []
    for item in data.get('signatures', []):
        item = _expect_dict(item, f"Signature of #{reflection.id}")
        comment = comment_from_dict(item['comment']) if item.get('comment') else None
        reflection.signatures.append(Signature(item['name'], comment))


def _load_children(project: ProjectReflection, parent: Reflection, children: List[Dict[str, Any]]):
    for child_data in children:
        child_id = int(child_data['id'])
        if child_id in project.reflections:
            raise SerializationError(f"Duplicate reflection id {child_id}")

        child = Reflection(child_id, child_data['name'], ReflectionKind(child_data['kind']),
                           parent_id=parent.id)
        if child.kind == ReflectionKind.PROJECT:
            raise SerializationError(f"Nested project reflection #{child_id}")
        _load_common(child, child_data)
        project.register(child)
        parent.children.append(child.id)

        _load_children(project, child, child_data.get('children', []))
        _load_groups(project, child, child_data)


def _load_groups(project: ProjectReflection, reflection: Reflection, data: Dict[str, Any]):
    groups: Optional[List[Dict[str, Any]]] = data.get('groups')
    if groups is None:
        for child in project.children_of(reflection):
            project.add_to_group(reflection, child)
        return

    for group_data in groups:
        group = ReflectionGroup(ReflectionKind(group_data['kind']),
                                [int(child_id) for child_id in group_data.get('children', [])],
                                title=group_data.get('title'))
        for child_id in group.children:
            if child_id not in reflection.children:
                raise SerializationError(
                    f"Group '{group.title}' of #{reflection.id} lists #{child_id}, "
                    f"which is not a child"
                )
        if group.children:
            reflection.groups.append(group)
