DEFAULT_ADMIN = {
    "email": "admin@bionutrex.com",
    "name": "Admin BioNutrex",
    "password": "admin123",
}

HOME_SECTIONS = [
    {
        "section_key": "hero",
        "title": "Ciencia Avanzada. Pureza Natural.",
        "subtitle": "Innovación en Biotecnología",
        "content": (
            "Suplementos naturales de alta potencia fabricados con estándares "
            "de grado farmacéutico."
        ),
        "order": 1,
    },
    {
        "section_key": "quality",
        "title": "Calidad Superior",
        "subtitle": "Estándares Farmacéuticos",
        "content": "Cada lote cumple controles de pureza y trazabilidad.",
        "order": 2,
    },
    {
        "section_key": "methodology",
        "title": "Metodología Científica",
        "subtitle": "Investigación y Desarrollo",
        "content": "Formulamos a partir de evidencia clínica y ensayos propios.",
        "order": 3,
    },
    {
        "section_key": "blog",
        "title": "Blog y Noticias",
        "subtitle": "Mantente Informado",
        "content": "Investigación y novedades en biotecnología nutricional.",
        "order": 4,
    },
]

WELCOME_POST = {
    "title": "Bienvenidos a BioNutrex",
    "slug": "bienvenidos-bionutrex",
    "excerpt": "Nuestra misión y visión en la biotecnología nutricional.",
    "content": (
        "# Bienvenidos a BioNutrex\n\n"
        "## Nuestra Misión\n\n"
        "Suplementos naturales de la más alta calidad, respaldados por ciencia "
        "y fabricados bajo estándares farmacéuticos.\n\n"
        "## Nuestra Visión\n\n"
        "Liderar la innovación biotecnológica aplicada a la nutrición.\n"
    ),
    "image_url": "/uploads/blog-default.jpg",
    "author": "Equipo BioNutrex",
}
