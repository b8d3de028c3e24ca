"""Fixed vocabulary tables shared by the CV and job analyzers.

Everything here is immutable (tuples, frozensets, compiled patterns) so any
number of analyzer instances can read it concurrently.
"""

from __future__ import annotations

import re

TECH_SKILLS: tuple[str, ...] = (
    # Languages
    "JavaScript", "TypeScript", "Python", "Java", "PHP", "Ruby", "C++", "C#", ".NET",
    "Swift", "Kotlin", "Dart", "Solidity", "SQL", "NoSQL", "HTML", "CSS", "SCSS", "SASS",
    # Frameworks and libraries
    "React", "React Native", "Angular", "Vue", "Svelte", "Next.js", "Nuxt.js", "Gatsby",
    "Node.js", "Express", "Fastify", "Django", "Flask", "FastAPI", "Rails", "Laravel",
    "Spring", "Hibernate", "Flutter", "Expo", "Unity", "TensorFlow", "PyTorch", "Pandas",
    "NumPy", "Bootstrap", "Tailwind",
    # Data stores and search
    "MongoDB", "PostgreSQL", "MySQL", "SQLite", "Redis", "Elasticsearch", "Kibana",
    # Cloud, infra and tooling
    "AWS", "Azure", "GCP", "Google Cloud", "Docker", "Kubernetes", "Helm", "Istio",
    "Terraform", "Ansible", "Jenkins", "GitHub Actions", "Git", "GitHub", "GitLab",
    "Nginx", "Apache", "Grafana", "Prometheus", "Linux", "Ubuntu", "CentOS", "Windows",
    "macOS", "Android", "iOS", "Webpack", "Vite", "Rollup", "Babel", "ESLint", "Prettier",
    # Testing
    "Jest", "Cypress", "Playwright", "Selenium",
    # Design
    "Figma", "Sketch", "Adobe", "Photoshop", "Illustrator", "InDesign",
    # Practices and domains
    "GraphQL", "REST", "API", "Microservices", "Agile", "Scrum", "Kanban", "DevOps",
    "CI/CD", "Machine Learning", "AI", "Data Science", "Big Data", "Cloud Computing",
    "Blockchain", "Web3", "Cybersecurity", "IoT", "AR", "VR", "Service Mesh",
    "Event Sourcing", "CQRS", "Domain Driven Design", "Clean Architecture",
    "Test Driven Development", "Behavior Driven Development", "Pair Programming",
    "Code Review", "Continuous Integration", "Continuous Deployment", "Feature Flags",
    "A/B Testing", "Performance Testing", "Load Testing", "Security Testing",
    "Penetration Testing",
    # Security and compliance
    "OAuth", "JWT", "SAML", "LDAP", "Active Directory", "Single Sign On", "Encryption",
    "SSL", "TLS", "HTTPS", "Firewall", "VPN", "Network Security", "Cloud Security",
    "Data Privacy", "GDPR", "HIPAA", "SOC2", "ISO27001", "PCI DSS",
)

SOFT_SKILLS: tuple[str, ...] = (
    "leadership", "communication", "teamwork", "problem solving", "analytical",
    "creative", "innovative", "collaborative", "adaptable", "organized",
    "detail oriented", "time management", "project management", "critical thinking",
    "decision making", "negotiation", "presentation", "mentoring", "coaching",
    "strategic", "planning", "multitasking", "customer service", "interpersonal",
    "emotional intelligence", "conflict resolution", "flexibility", "reliability",
    "initiative", "self motivated", "results driven", "goal oriented",
    "performance driven",
)

CERTIFICATION_ISSUERS: tuple[str, ...] = (
    "AWS", "Azure", "Google Cloud", "Certified", "Certification", "PMP", "Scrum Master",
    "CompTIA", "Cisco", "Microsoft", "Oracle", "Salesforce", "HubSpot",
    "Google Analytics", "Adobe Certified", "PMI", "CISSP", "CISM", "Security+",
    "Network+", "A+", "Linux+", "CCNA", "CCNP", "CCIE", "Red Hat", "Docker", "Kubernetes",
)

ROLE_TITLE_WORDS: tuple[str, ...] = (
    "Software Engineer", "Developer", "Manager", "Lead", "Senior", "Junior", "Analyst",
    "Consultant", "Designer", "Architect", "Director", "VP", "CTO", "CEO", "Intern",
    "Coordinator", "Specialist", "Technician",
)

METRIC_UNITS: tuple[str, ...] = (
    "percent", "users", "customers", "revenue", "sales", "projects", "teams", "people",
    "hours", "days", "months", "years", "million", "billion", "thousand", "k", "m", "b",
)

ACHIEVEMENT_VERBS: tuple[str, ...] = (
    "achieved", "increased", "reduced", "improved", "led", "managed", "developed",
    "implemented", "created", "built", "designed", "optimized", "automated",
    "streamlined", "delivered", "launched", "established", "initiated", "coordinated",
    "supervised", "mentored", "trained",
)

WEAK_PHRASES: tuple[str, ...] = (
    "responsible for", "worked on", "helped with", "participated in", "involved in",
    "assisted with",
)

GENERIC_PHRASES: tuple[str, ...] = (
    "hard worker", "team player", "detail oriented", "fast learner",
)

STOP_WORDS: frozenset[str] = frozenset({
    "the", "and", "or", "but", "in", "on", "at", "to", "for", "of", "with", "by", "from",
    "up", "about", "into", "through", "during", "before", "after", "above", "below",
    "between", "among", "is", "are", "was", "were", "be", "been", "being", "have", "has",
    "had", "do", "does", "did", "will", "would", "could", "should", "may", "might",
    "must", "can", "a", "an", "this", "that", "these", "those", "our", "your", "their",
    "we", "you", "they", "i", "me", "my", "us", "him", "her", "his", "its", "who", "what",
    "when", "where", "why", "how",
})

# Ordered: the first keyword group found in the header line wins.
SECTION_HEADER_KEYWORDS: tuple[tuple[str, tuple[str, ...]], ...] = (
    ("summary", ("summary", "profile", "objective")),
    ("experience", ("experience", "employment", "work history")),
    ("skills", ("skill", "technical", "competenc")),
    ("education", ("education", "qualification", "academic")),
    ("projects", ("project", "portfolio")),
    ("achievements", ("achievement", "award", "accomplishment")),
)

REQUIRED_HEADERS: tuple[str, ...] = ("required", "must have", "essential", "minimum", "qualifications")
PREFERRED_HEADERS: tuple[str, ...] = ("preferred", "nice to have", "bonus", "plus", "additional", "desired")
RESPONSIBILITY_HEADERS: tuple[str, ...] = (
    "responsibilities", "duties", "role", "what you'll do", "day to day", "key tasks",
    "primary functions",
)
REQUIREMENT_HEADERS: tuple[str, ...] = (
    "requirements", "qualifications", "must have", "essential", "minimum", "experience",
    "skills", "what we're looking for",
)
BENEFIT_HEADERS: tuple[str, ...] = (
    "benefits", "perks", "what we offer", "compensation", "package", "rewards",
)

# Ordered: the first industry with a matching keyword wins.
INDUSTRIES: tuple[tuple[str, tuple[str, ...]], ...] = (
    ("Financial Technology", ("fintech", "financial", "banking", "payment", "trading", "cryptocurrency", "blockchain")),
    ("Healthcare", ("healthcare", "medical", "hospital", "patient", "clinical", "pharma", "biotech")),
    ("E-commerce", ("ecommerce", "e-commerce", "retail", "shopping", "marketplace", "consumer")),
    ("SaaS", ("saas", "software as a service", "b2b", "enterprise", "cloud")),
    ("Gaming & Entertainment", ("gaming", "game", "entertainment", "media", "streaming")),
    ("Education Technology", ("education", "learning", "edtech", "student", "academic")),
    ("Startup", ("startup", "early stage", "series a", "series b", "venture")),
    ("Consulting", ("consulting", "agency", "services", "client work")),
)

SENIOR_CUES: tuple[str, ...] = ("senior", "sr.", "principal")
LEAD_CUES: tuple[str, ...] = ("lead",)
EXECUTIVE_CUES: tuple[str, ...] = ("director", "vp", "cto", "head of", "chief")
ENTRY_CUES: tuple[str, ...] = ("junior", "jr.", "entry", "graduate", "intern", "internship")

# Strong verbs keyed by words found in the bullet; the first matching row wins.
STRONG_VERBS: tuple[tuple[tuple[str, ...], tuple[str, ...]], ...] = (
    (("develop", "build", "create"), ("Architected", "Engineered", "Developed")),
    (("manage", "lead", "team"), ("Led", "Directed", "Managed")),
    (("improve", "optimize", "enhance"), ("Optimized", "Enhanced", "Improved")),
    (("implement", "deploy"), ("Implemented", "Deployed", "Executed")),
    (("analyze", "research"), ("Analyzed", "Researched", "Investigated")),
)
DEFAULT_STRONG_VERBS: tuple[str, ...] = ("Delivered", "Achieved", "Accomplished")

METRIC_CONTEXTS: tuple[tuple[str, tuple[str, ...]], ...] = (
    ("performance", ("performance", "speed", "load")),
    ("users", ("user", "customer", "client")),
    ("team", ("team", "people", "member")),
    ("cost", ("cost", "budget", "save")),
    ("time", ("time", "deadline", "schedule")),
    ("revenue", ("revenue", "sales", "profit")),
)
CONTEXT_METRICS: dict[str, str] = {
    "performance": "reduced load time by 40%",
    "users": "impacting 10,000+ users",
    "team": "leading team of 5+ developers",
    "cost": "saving $50K annually",
    "time": "delivering 2 weeks ahead of schedule",
    "revenue": "contributing to 15% revenue increase",
    "general": "achieving 95% success rate",
}


def _alternation(terms: tuple[str, ...], *, loose_spaces: bool = False) -> str:
    """Regex alternation over terms, longest first so "React Native" beats "React"."""
    escaped = []
    for term in sorted(set(terms), key=len, reverse=True):
        piece = re.escape(term)
        if loose_spaces:
            piece = piece.replace(r"\ ", r"[\s-]")
        escaped.append(piece)
    return "|".join(escaped)


TECH_PATTERN = re.compile(rf"(?<![\w.+#])(?:{_alternation(TECH_SKILLS)})(?![\w+#])", re.IGNORECASE)
SOFT_SKILL_PATTERN = re.compile(rf"\b(?:{_alternation(SOFT_SKILLS, loose_spaces=True)})\b", re.IGNORECASE)
CERTIFICATION_PATTERN = re.compile(
    rf"(?<!\w)(?:{_alternation(CERTIFICATION_ISSUERS)})[^.\n]*?\b(?:Certified|Certification|Certificate)\b",
    re.IGNORECASE,
)
ROLE_PATTERN = re.compile(rf"\b(?:{_alternation(ROLE_TITLE_WORDS)})\b[\w ]*", re.IGNORECASE)
COMPANY_MENTION_PATTERN = re.compile(
    r"(?:\bat|@)[ \t]+([A-Z][A-Za-z&.,]*(?:[ \t]+[A-Za-z&.,]+)*?)(?=[ \t]*\(|[ \t]*-|[ \t]*\d{4}|[ \t]*$)",
    re.MULTILINE,
)
METRIC_PATTERN = re.compile(
    rf"\d+(?:,\d{{3}})*(?:\.\d+)?[ \t]*(?:%|(?:{_alternation(METRIC_UNITS)})\b)",
    re.IGNORECASE,
)
ACHIEVEMENT_PATTERN = re.compile(
    rf"(?:^[ \t]*(?:[•*-]|\d+\.)?[ \t]*|(?<=[.!?])[ \t]+)"
    rf"((?:{_alternation(ACHIEVEMENT_VERBS)})\b[^.!?\n]*(?:[.!?]|$))",
    re.IGNORECASE | re.MULTILINE,
)
YEARS_EXPERIENCE_PATTERN = re.compile(r"\b(\d+)\+?\s*years?\s*(?:of\s*)?experience")
BULLET_PATTERN = re.compile(r"^(?:[•*-]|\d+[.)])\s*")

_CANONICAL_TECH = {name.lower(): name for name in TECH_SKILLS}
_CANONICAL_SOFT = {name.lower(): name for name in SOFT_SKILLS}


def canonical_tech(match: str) -> str:
    """Map a matched technology back to its vocabulary spelling."""
    return _CANONICAL_TECH.get(match.lower(), match)


def canonical_soft_skill(match: str) -> str:
    key = re.sub(r"[\s-]+", " ", match.lower())
    return _CANONICAL_SOFT.get(key, key)
