def normalize_item(item):
    return {
        "id": item.id,
        "sectionId": item.section_id,
        "title": item.title,
        "description": item.description,
        "href": item.href,
        "meta": item.meta,
        "sortOrder": item.sort_order,
    }
