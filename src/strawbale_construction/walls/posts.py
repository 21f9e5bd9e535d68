# File: src/strawbale_construction/walls/posts.py
"""Post construction for infill walls."""

from ..config.schemas import DoublePostConfig, FullPostConfig
from ..core.elements import create_element_from_area
from ..core.results import ResultStream, element_result, error_result
from ..core.tags import TAG_INFILL, TAG_POST
from ..geometry.area import WallConstructionArea


def construct_post(area: WallConstructionArea, post: FullPostConfig) -> ResultStream:
    """
    Builds one post filling the given area.

    Full posts are a single member through the core. Double posts are two
    members on the core faces with insulation between them.

    Args:
        area: Post slot; its width is the post width
        post: Post configuration

    Yields:
        Post (and infill) elements
    """
    if not isinstance(post, DoublePostConfig):
        yield element_result(create_element_from_area(area, post.material, [TAG_POST]))
        return

    if area.thickness < 2 * post.thickness:
        element = create_element_from_area(area, post.material, [TAG_POST])
        yield element_result(element)
        yield error_result("Wall is too thin for a double post", [element])
        return

    inner = area.with_y_adjustment(0, post.thickness)
    outer = area.with_y_adjustment(area.thickness - post.thickness, post.thickness)
    yield element_result(create_element_from_area(inner, post.material, [TAG_POST]))
    yield element_result(create_element_from_area(outer, post.material, [TAG_POST]))

    gap = area.thickness - 2 * post.thickness
    if gap > 0:
        middle = area.with_y_adjustment(post.thickness, gap)
        yield element_result(create_element_from_area(middle, post.infill_material, [TAG_INFILL]))
