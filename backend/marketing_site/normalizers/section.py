from marketing_site.sections.dividers import background_of
from marketing_site.sections.registry import get_section_type


def normalize_divider(divider):
    if divider is None:
        return None
    return {
        "style": divider.style.value,
        "from_color": divider.from_color,
        "to_color": divider.to_color,
        "flip": divider.flip,
        "height": divider.height,
    }


def normalize_section(section, divider=None, editor=False):
    data = {
        "key": section.get("_key"),
        "type": section.get("_type"),
        "background": background_of(section),
        "known": get_section_type(section.get("_type")) is not None,
        "divider": normalize_divider(divider),
    }

    if editor:
        data["content"] = dict(section)

    return data
