def normalize_site(site):
    return {
        "id": site.id,
        "slug": site.slug,
        "title": site.title,
        "tagline": site.tagline,
        "email": site.email,
        "location": site.location,
        "linkedin": site.linkedin,
        "github": site.github,
        "heroHeadline": site.hero_headline,
        "heroSubhead": site.hero_subhead,
    }
