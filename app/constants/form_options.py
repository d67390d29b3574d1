# Options offered by the contact page quote form
PROJECT_TYPES = [
    "As-Built Drawings",
    "2D Drafting",
    "3D Rendering",
    "CAD Conversion",
    "HVAC Drawings",
    "Solar PV",
    "Commissioning",
    "Legionella Schematic",
    "Facilities Mapping",
    "Other",
]

BUDGET_RANGES = [
    "Under £1,000",
    "£1,000 - £5,000",
    "£5,000 - £10,000",
    "£10,000 - £25,000",
    "£25,000+",
    "Discuss in consultation",
]

TIMELINES = [
    "Rush (1-3 days)",
    "Standard (1-2 weeks)",
    "Extended (2-4 weeks)",
    "Ongoing project",
    "Flexible",
]

# value -> label, as posted by the quick message forms
SERVICES = {
    "legionella": "Legionella Schematic Drawing",
    "solar": "Solar PV Layouts & Wiring",
    "commissioning": "Commissioning & Pre-Commissioning",
    "as-built": "As-Built Drawings",
    "hvac": "HVAC Drawing",
    "gis": "Facilities Mapping & GIS",
    "3d-rendering": "3D Rendering & Modeling",
    "cad-conversion": "CAD Conversion",
    "2d-drafting": "2D Drafting & Designing",
    "mapping-services": "Mapping services",
    "draft-design": "Draft & Design",
    "risk-mapping": "Risk Mapping",
    "documentation": "Documentation",
    "other": "Other",
}

FORM_OPTIONS = {
    "projectType": PROJECT_TYPES,
    "budget": BUDGET_RANGES,
    "timeline": TIMELINES,
    "service": list(SERVICES),
}
