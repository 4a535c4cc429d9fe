"""
Tag factory for AWS resources.

Every resource carries the project defaults, its environment, a Name tag,
and the stack component that declared it.
"""

from openvpn_infra.configs.constants import DEFAULT_TAGS


def create_tags(
    environment: str,
    resource_name: str,
    component: str | None = None,
    **extra_tags: str,
) -> dict[str, str]:
    """
    Create a standard tag set for an AWS resource.

    Args:
        environment: Deployment environment
        resource_name: Value for the Name tag
        component: Owning stack component (e.g. 'networking', 'storage')
        **extra_tags: Additional tags to include

    Returns:
        Dictionary of tags
    """
    tags = {
        **DEFAULT_TAGS,
        "Environment": environment,
        "Name": resource_name,
    }
    if component:
        tags["Component"] = component
    return merge_tags(tags, extra_tags)


def merge_tags(
    base_tags: dict[str, str],
    *additional_tags: dict[str, str],
) -> dict[str, str]:
    """
    Merge tag dictionaries, later ones winning on key clashes.

    The base dictionary is left untouched.
    """
    result = dict(base_tags)
    for tags in additional_tags:
        result.update(tags)
    return result
