"""Fixed vocabularies for keyword extraction and matching.

Every table is built once at import and exposed read-only. Terms that contain
compound spellings (``c++``, ``ci/cd``, ``node.js``) are stored in the same
normalized form the tokenizer produces, so lookups never see the raw spelling.
"""

from __future__ import annotations

import re
from types import MappingProxyType
from typing import Mapping

from .text import normalize_text

STOPWORDS: frozenset[str] = frozenset(
    {
        # Articles
        "a", "an", "the",
        # Pronouns
        "i", "me", "my", "myself", "we", "our", "ours", "ourselves", "you", "your",
        "yours", "yourself", "yourselves", "he", "him", "his", "himself", "she", "her",
        "hers", "herself", "it", "its", "itself", "they", "them", "their", "theirs",
        "themselves", "what", "which", "who", "whom", "this", "that", "these", "those",
        # Auxiliaries
        "am", "is", "are", "was", "were", "be", "been", "being", "have", "has", "had",
        "having", "do", "does", "did", "doing", "would", "should", "could", "ought",
        "will", "shall", "can", "may", "might", "must",
        # Prepositions
        "at", "by", "for", "from", "in", "into", "of", "on", "to", "with", "about",
        "above", "across", "after", "against", "along", "among", "around", "before",
        "behind", "below", "beneath", "beside", "between", "beyond", "during", "except",
        "inside", "near", "off", "outside", "over", "past", "since", "through",
        "throughout", "toward", "under", "until", "up", "upon", "within", "without",
        # Conjunctions and fillers
        "and", "but", "or", "nor", "so", "yet", "both", "either", "neither", "not",
        "only", "own", "same", "than", "too", "very", "just", "also", "as", "if",
        "all", "any", "each", "every", "other", "such", "more", "most", "some", "well",
        "plus", "etc", "eg", "ie", "via", "per", "like", "including",
        # Job-ad filler
        "ability", "able", "work", "working", "company", "team", "teams", "role", "position",
        "opportunity", "looking", "seeking", "join", "offer", "related", "relevant",
        "strong", "excellent", "good", "great", "proven", "demonstrated", "successful",
        "effective", "required", "requirements", "responsibilities", "qualifications",
        "preferred", "minimum", "ensure", "provide", "support", "help", "need",
        "needs", "make", "job", "title", "candidate", "candidates", "ideal", "bonus",
        "nice", "someone", "new", "highly", "equivalent", "similar",
        "proficiency", "proficient", "understanding", "familiarity", "familiar",
        "knowledge", "experience", "experienced", "expertise", "exposure", "contributions",
        "passion", "passionate", "enthusiasm", "comfortable", "competence",
        "competent", "skilled", "capable", "hands-on", "background", "skills", "skill",
        # Time
        "years", "year", "yrs", "months", "month", "days", "day", "time", "times",
    }
)

# Meaningful two-letter tokens that survive keyword candidacy.
SHORT_TECH_TOKENS: frozenset[str] = frozenset(
    {"go", "js", "ts", "py", "ai", "ml", "ui", "ux", "qa", "bi", "ci", "cd", "ds", "pm", "os", "db"}
)

_RAW_SKILL_SYNONYMS: dict[str, tuple[str, ...]] = {
    # Cloud platforms
    "cloud": ("gcp", "aws", "azure", "cloud-native", "cloud infrastructure", "google cloud", "amazon web services"),
    "gcp": ("google cloud platform", "google cloud", "gke", "cloud run", "bigquery"),
    "aws": ("amazon web services", "ec2", "s3", "lambda", "eks", "cloudwatch", "sagemaker"),
    "azure": ("microsoft azure", "azure devops", "aks", "azure functions"),
    # Leadership
    "leadership": ("led", "leading", "leader", "managed", "managing", "directed", "oversaw", "headed", "spearheaded"),
    "management": ("manager", "managing", "managed", "supervising", "supervisor", "oversight"),
    "engineering manager": ("em", "tech lead manager", "engineering lead", "eng manager", "engineering mgr"),
    "director": ("director of engineering", "engineering director", "director, engineering"),
    "people management": ("people manager", "team management", "managing people", "direct reports"),
    "mentoring": ("mentorship", "coaching", "career development", "growing engineers"),
    # Platform / infrastructure
    "platform": ("platform engineering", "internal platform", "developer platform", "devex", "infrastructure"),
    "infrastructure": ("infra", "cloud infrastructure", "platform infrastructure"),
    "devops": ("devex", "developer experience", "developer productivity", "developer tools"),
    "sre": ("site reliability", "reliability engineering", "platform reliability"),
    "system design": ("systems design", "architecture design", "technical design"),
    # Containers
    "kubernetes": ("k8s", "gke", "eks", "aks", "container orchestration"),
    "docker": ("containers", "containerization", "containerized"),
    "terraform": ("infrastructure as code", "iac", "pulumi", "hcl"),
    # CI/CD
    "ci/cd": ("continuous integration", "continuous deployment", "continuous delivery", "pipelines"),
    "github actions": ("gh actions", "github workflows"),
    "jenkins": ("ci server", "build automation"),
    # Languages
    "python": ("py", "python3", "python2"),
    "javascript": ("js", "node", "node.js", "typescript", "ts", "ecmascript"),
    "typescript": ("ts", "node typescript"),
    "java": ("jvm", "java8", "java11", "java17", "spring", "spring boot"),
    "go": ("golang", "go lang"),
    "c++": ("cpp", "c plus plus"),
    "c#": ("csharp", "c sharp", ".net"),
    "rust": ("rustlang",),
    "ruby": ("rails", "ruby on rails"),
    "scala": ("akka", "play framework"),
    "kotlin": ("android kotlin", "kotlin multiplatform"),
    "swift": ("swiftui", "ios swift"),
    # Methodologies
    "agile": ("scrum", "kanban", "sprint", "agile methodology", "agile development"),
    "scrum": ("sprint", "sprint planning", "scrum master", "agile scrum"),
    # Architecture
    "microservices": ("microservice", "service-oriented", "distributed services"),
    "distributed systems": ("distributed computing", "distributed architecture"),
    "api": ("api design", "rest", "restful", "graphql", "grpc", "api development"),
    "event-driven": ("event sourcing", "cqrs", "message-driven", "pub/sub"),
    # Databases
    "sql": ("mysql", "postgresql", "postgres", "database", "rdbms"),
    "nosql": ("mongodb", "dynamodb", "cassandra", "redis"),
    "data modeling": ("schema design", "database design", "erd"),
    # Observability
    "observability": ("monitoring", "logging", "tracing", "metrics", "opentelemetry", "prometheus", "grafana"),
    "monitoring": ("observability", "alerting", "dashboards"),
    # Communication
    "stakeholder management": ("stakeholder alignment", "cross-functional", "executive communication"),
    "communication": ("written communication", "verbal communication", "presentation"),
    # Industry domains
    "healthcare": ("health tech", "healthtech", "medical", "clinical", "hipaa"),
    "fintech": ("financial technology", "finance", "banking", "payments"),
    "telecom": ("telecommunications", "5g", "4g", "3g", "wireless"),
    "ecommerce": ("e-commerce", "online retail", "marketplace", "shopping"),
    # AI / ML
    "machine learning": ("ml", "deep learning", "neural networks", "model training", "ml engineering"),
    "artificial intelligence": ("ai", "generative ai", "gen ai", "llm", "large language models"),
    "tensorflow": ("tf", "keras", "tf2"),
    "pytorch": ("torch", "torchvision"),
    "data science": ("data scientist", "statistical modeling", "predictive analytics"),
    "nlp": ("natural language processing", "text mining", "language models"),
    "computer vision": ("cv", "image recognition", "object detection"),
    # Data engineering
    "data pipeline": ("etl", "data ingestion", "data workflow", "data orchestration"),
    "data warehouse": ("data lake", "data lakehouse", "olap", "dimensional modeling"),
    "apache spark": ("spark", "pyspark", "spark sql"),
    "apache kafka": ("kafka", "kafka streams", "event streaming"),
    "airflow": ("apache airflow", "dag", "workflow orchestration"),
    "dbt": ("data build tool", "data transformation"),
    # Security
    "security": ("cybersecurity", "infosec", "information security", "appsec"),
    "authentication": ("auth", "oauth", "saml", "openid", "sso"),
    "encryption": ("tls", "ssl", "cryptography", "data encryption"),
    "compliance": ("soc2", "soc 2", "gdpr", "hipaa", "pci dss", "iso 27001"),
    # Product
    "product management": ("product manager", "pm", "product owner", "product strategy"),
    "roadmap": ("product roadmap", "technology roadmap", "strategic planning"),
    "user research": ("ux research", "user testing", "usability testing"),
    # Frontend
    "frontend": ("front-end", "front end", "client-side", "ui development"),
    "react": ("reactjs", "react.js", "react hooks", "react native"),
    "css": ("sass", "scss", "tailwind", "styled-components", "css-in-js"),
    "design system": ("component library", "ui library", "storybook"),
    # Mobile
    "mobile": ("mobile development", "mobile app", "native mobile"),
    "ios": ("iphone", "ipad", "apple platform", "uikit", "swiftui"),
    "android": ("android sdk", "jetpack compose", "android studio"),
    "react native": ("expo", "cross-platform mobile"),
    "flutter": ("dart", "cross-platform mobile"),
    # Testing
    "testing": ("test automation", "qa", "quality assurance", "test engineering"),
    "unit testing": ("unit tests", "test-driven development", "tdd"),
    "integration testing": ("integration tests", "e2e testing", "end-to-end testing"),
    # Project management
    "project management": ("program management", "delivery management", "project planning"),
    "jira": ("atlassian", "confluence", "project tracking"),
}


def _dedupe(values: list[str]) -> tuple[str, ...]:
    seen: set[str] = set()
    output: list[str] = []
    for value in values:
        if value and value not in seen:
            seen.add(value)
            output.append(value)
    return tuple(output)


def _build_synonyms() -> Mapping[str, tuple[str, ...]]:
    table: dict[str, tuple[str, ...]] = {}
    for canonical, variants in _RAW_SKILL_SYNONYMS.items():
        key = normalize_text(canonical).strip()
        normalized = [normalize_text(variant).strip() for variant in variants]
        table[key] = _dedupe([item for item in normalized if item != key])
    return MappingProxyType(table)


def _build_reverse_index(synonyms: Mapping[str, tuple[str, ...]]) -> Mapping[str, tuple[str, ...]]:
    index: dict[str, list[str]] = {}
    for canonical, variants in synonyms.items():
        for variant in variants:
            index.setdefault(variant, []).append(canonical)
    return MappingProxyType({key: tuple(value) for key, value in index.items()})


SKILL_SYNONYMS: Mapping[str, tuple[str, ...]] = _build_synonyms()
SYNONYM_REVERSE_INDEX: Mapping[str, tuple[str, ...]] = _build_reverse_index(SKILL_SYNONYMS)

KNOWN_PHRASES: frozenset[str] = frozenset(
    {
        # AI / ML
        "machine learning", "deep learning", "neural networks", "natural language processing",
        "computer vision", "data science", "artificial intelligence", "generative ai",
        "large language models", "model training", "ml engineering", "reinforcement learning",
        "feature engineering",
        # Data
        "data pipeline", "data warehouse", "data lake", "data engineering", "data modeling",
        "data governance", "data quality", "data analytics", "big data", "data processing",
        "real-time data", "data integration", "data migration",
        # Architecture and systems
        "system design", "systems design", "distributed systems", "microservices architecture",
        "event-driven architecture", "service-oriented architecture", "domain-driven design",
        "api design", "api development", "technical architecture", "solution architecture",
        "high availability", "fault tolerance", "load balancing", "horizontal scaling",
        # Cloud and infrastructure
        "cloud infrastructure", "infrastructure as code", "cloud-native", "cloud migration",
        "container orchestration", "platform engineering", "developer platform",
        "google cloud platform", "amazon web services", "microsoft azure",
        "site reliability", "reliability engineering",
        # DevOps
        "continuous integration", "continuous deployment", "continuous delivery",
        "github actions", "build automation", "deployment automation",
        "infrastructure automation", "configuration management",
        # Management and leadership
        "engineering manager", "engineering director", "tech lead", "technical lead",
        "people management", "team management", "team building", "performance management",
        "stakeholder management", "cross-functional", "direct reports",
        "product management", "product manager", "program management", "project management",
        "change management", "organizational design", "talent development",
        # Software engineering
        "software engineering", "software development", "software architecture",
        "full stack", "full-stack", "back end", "back-end", "front end", "front-end",
        "test-driven development", "code review", "technical debt",
        "agile development", "agile methodology", "design patterns",
        "object-oriented", "functional programming", "version control",
        # Frontend
        "user interface", "user experience", "design system", "component library",
        "responsive design", "web development", "single page application",
        "progressive web app", "accessibility compliance",
        # Mobile
        "mobile development", "mobile app", "react native", "cross-platform mobile",
        "native mobile", "mobile architecture",
        # Security
        "information security", "application security", "network security",
        "threat modeling", "penetration testing", "security audit",
        "access control", "identity management",
        # Testing
        "test automation", "quality assurance", "integration testing",
        "end-to-end testing", "unit testing", "performance testing",
        "load testing", "regression testing",
        # Database
        "database design", "database administration", "schema design",
        "query optimization", "data replication",
        # Networking
        "api gateway", "service mesh", "message queue", "event streaming",
        # Business
        "business intelligence", "competitive analysis", "market research",
        "user research", "customer experience", "digital transformation",
        "technical strategy", "technology roadmap", "strategic planning",
        "open source",
        # Governance
        "regulatory compliance", "risk management", "audit compliance",
        # Observability
        "log management", "distributed tracing", "incident management",
        "on-call", "runbook automation",
        # Roles
        "software engineer", "senior engineer", "staff engineer", "principal engineer",
        "engineering lead", "data engineer", "data scientist", "data analyst",
        "product designer", "ux designer", "solutions architect", "cloud architect",
        "devops engineer", "sre engineer", "security engineer", "qa engineer",
        "mobile engineer", "frontend engineer", "backend engineer",
        "machine learning engineer", "platform engineer",
    }
)

# Longest first so greedy extraction prefers "machine learning engineer" over "machine learning".
SORTED_PHRASES: tuple[str, ...] = tuple(sorted(KNOWN_PHRASES, key=lambda item: (-len(item), item)))

TECH_KEYWORDS: frozenset[str] = frozenset(
    normalize_text(term)
    for term in (
        # Cloud
        "gcp", "aws", "azure", "cloud", "kubernetes", "k8s", "docker", "terraform",
        "ansible", "pulumi", "cloudformation",
        # Languages
        "python", "java", "javascript", "typescript", "go", "golang", "rust", "c++",
        "c#", "ruby", "scala", "kotlin", "swift", ".net",
        # Frameworks
        "react", "react.js", "angular", "vue", "vue.js", "node", "node.js", "django",
        "flask", "spring", "rails", "express", "fastapi", "next.js", "nextjs",
        # Data
        "sql", "postgresql", "mysql", "mongodb", "redis", "elasticsearch", "kafka",
        "spark", "hadoop", "bigquery", "snowflake", "databricks", "airflow", "dbt",
        "pandas", "tensorflow", "pytorch",
        # CI/CD
        "jenkins", "github", "gitlab", "bitbucket", "circleci", "travis",
        "argocd", "spinnaker", "tekton", "ci/cd",
        # Monitoring
        "prometheus", "grafana", "datadog", "splunk", "newrelic", "pagerduty",
        "opentelemetry", "jaeger",
        # Protocols
        "rest", "graphql", "grpc", "websockets", "http", "tcp",
        # Security
        "oauth", "jwt", "ssl", "tls", "sso", "iam",
        # Methodologies
        "agile", "scrum", "kanban", "devops", "sre",
        # Multi-word
        "machine learning", "deep learning", "data pipeline", "data warehouse",
        "infrastructure as code", "system design", "distributed systems",
        "github actions", "site reliability",
    )
)

ACTION_VERBS: frozenset[str] = frozenset(
    {
        # Leadership
        "led", "managed", "directed", "oversaw", "headed", "supervised", "mentored",
        "coached", "guided", "coordinated", "orchestrated", "spearheaded",
        # Achievement
        "achieved", "delivered", "accomplished", "completed", "exceeded", "surpassed",
        # Creation
        "built", "created", "designed", "developed", "established", "founded",
        "implemented", "launched", "initiated", "introduced",
        # Improvement
        "improved", "enhanced", "optimized", "streamlined", "accelerated", "increased",
        "reduced", "decreased", "transformed", "modernized", "upgraded",
        # Strategy
        "architected", "strategized", "planned", "pioneered", "innovated",
        # Collaboration
        "collaborated", "partnered", "aligned", "unified", "integrated",
        # Technical
        "engineered", "automated", "scaled", "migrated", "deployed", "configured",
    }
)

REQUIRED_SECTION_MARKERS: tuple[str, ...] = (
    "required", "requirements", "must have", "must-have", "minimum qualifications",
    "what you bring", "what we require", "essential", "mandatory",
    "what you'll need", "qualifications", "what we're looking for",
    "you should have", "key skills", "core requirements",
    "basic qualifications", "you will need", "key qualifications",
)

# Checked before the required markers: "preferred qualifications" must not land in required.
NICE_TO_HAVE_MARKERS: tuple[str, ...] = (
    "nice to have", "nice-to-have", "preferred", "bonus", "plus", "ideal", "desired",
    "additionally", "preferred qualifications", "it would be great if",
    "extra credit", "additional qualifications", "desirable", "a plus", "advantageous",
)

RESPONSIBILITIES_MARKERS: tuple[str, ...] = (
    "responsibilities", "what you'll do", "what you will do",
    "your role", "the role", "job duties", "key responsibilities",
    "day to day", "day-to-day", "in this role", "you will",
    "duties", "scope", "about the role", "role overview",
)

ABOUT_SECTION_MARKERS: tuple[str, ...] = (
    "about us", "about the company", "who we are", "our mission",
    "company overview", "about the team", "why join",
    "what we offer", "benefits", "perks", "compensation",
)

ROLE_WORD_RE = re.compile(
    r"\b(engineer|manager|director|lead|senior|staff|principal|architect|developer|analyst|"
    r"scientist|designer|head|vp|vice president|coordinator|administrator|specialist|"
    r"consultant|strategist)\b",
    re.IGNORECASE,
)
