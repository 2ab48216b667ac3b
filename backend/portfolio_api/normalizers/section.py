from .item import normalize_item


def normalize_section(section, include_items=False):
    data = {
        "id": section.id,
        "siteId": section.site_id,
        "key": section.section_key,
        "title": section.title,
        "icon": section.icon,
        "sortOrder": section.sort_order,
    }

    if include_items:
        items = sorted(section.items, key=lambda i: i.sort_order)
        data["items"] = [normalize_item(i) for i in items]

    return data
