# DailyChallenges/agents/challenge_prompts.py

# Phrase in the fallback templates that is swapped for the user's problem statement
DOMAIN_PLACEHOLDER = "your problem domain"

# ============ Skill keyword -> curriculum track ============
# Checked in order against the lower-cased primary skill; first hit wins.
TRACK_KEYWORDS = [
    ("frontend", ("react", "frontend", "javascript")),
    ("backend", ("python", "backend")),
    ("ml", ("ml", "ai")),
    ("design", ("ui", "ux", "design")),
]
DEFAULT_TRACK = "general"

# ============ Day-by-day outline per track (Day 1 foundation ... Day 5 polish) ============
CURRICULUM = {
    "frontend": [
        "Foundation: project scaffold, routing and a reusable component layout",
        "State: client-side state management and data flow between components",
        "Integration: consuming a REST API with loading and error states",
        "Interactivity: forms, validation and real-time UI updates",
        "Polish: accessibility, performance and a production build",
    ],
    "backend": [
        "Foundation: data model and API skeleton",
        "Core logic: CRUD endpoints with input validation",
        "Security: authentication and per-user authorization",
        "Integration: background jobs and a third-party service",
        "Polish: tests, API documentation and deployment",
    ],
    "ml": [
        "Foundation: dataset collection and exploratory analysis",
        "Baseline: a first model with a clear evaluation metric",
        "Improvement: feature engineering and model tuning",
        "Serving: exposing the model behind an inference API",
        "Polish: error analysis, explainability and a demo",
    ],
    "design": [
        "Foundation: user research and personas",
        "Structure: user flows and low-fidelity wireframes",
        "Visuals: high-fidelity mockups and a small design system",
        "Prototype: an interactive clickable prototype",
        "Polish: usability testing and final presentation",
    ],
    "general": [
        "Foundation: problem analysis and solution architecture",
        "Core feature: the single most important user workflow",
        "Data: persistence layer and data validation",
        "Integration: connecting components end to end",
        "Polish: testing, documentation and pitch demo",
    ],
}

# ============ Static fallback templates, (title, description) per track and stage ============
FALLBACK_TEMPLATES = {
    "frontend": [
        (
            "{skill} Foundations: Landing Dashboard",
            "Set up a {skill} project for your problem domain. Build a landing page with a "
            "navigation bar, a hero section describing the problem, and a dashboard layout "
            "made of at least three reusable components.\n\n"
            "**Deliverables:** routed pages, a shared layout component, responsive styling.",
        ),
        (
            "{skill} State: Managing Application Data",
            "Model the core entities of your problem domain on the client. Implement a list "
            "and a detail view that share state, with add, edit and delete actions.\n\n"
            "**Deliverables:** a central store or context, derived values, no prop drilling "
            "deeper than two levels.",
        ),
        (
            "{skill} Integration: Live Data",
            "Connect the UI for your problem domain to a REST API (mock server allowed). "
            "Show loading skeletons, empty states and error messages with retry buttons.\n\n"
            "**Deliverables:** an API client module, request status handling, pagination.",
        ),
        (
            "{skill} Interactivity: Forms and Real-time Updates",
            "Add a multi-step form that captures input relevant to your problem domain with "
            "field validation. Reflect changes in the dashboard without a page reload.\n\n"
            "**Deliverables:** inline validation errors, optimistic updates, toast feedback.",
        ),
        (
            "{skill} Polish: Ship It",
            "Prepare the frontend for your problem domain for demo day. Audit accessibility, "
            "reduce bundle size, and deploy a production build.\n\n"
            "**Deliverables:** a lighthouse score above 90, keyboard navigation, a live URL.",
        ),
    ],
    "backend": [
        (
            "{skill} Foundations: API Skeleton",
            "Design the data model for your problem domain and expose it through a minimal "
            "{skill} API with a health endpoint and one resource.\n\n"
            "**Deliverables:** an entity diagram, migrations, a running server.",
        ),
        (
            "{skill} Core Logic: Validated CRUD",
            "Implement create, read, update and delete endpoints for the main resource of "
            "your problem domain. Reject invalid payloads with clear error messages.\n\n"
            "**Deliverables:** input schemas, proper status codes, filtering by query parameters.",
        ),
        (
            "{skill} Security: Users and Permissions",
            "Add user registration and token authentication to the service for your problem "
            "domain. Ensure users can only access their own records.\n\n"
            "**Deliverables:** hashed passwords, protected routes, an ownership check.",
        ),
        (
            "{skill} Integration: Background Work",
            "Offload a slow task from your problem domain (report generation, notifications, "
            "data import) to a background job and integrate one external API.\n\n"
            "**Deliverables:** a job queue or scheduler, status polling endpoint, timeout handling.",
        ),
        (
            "{skill} Polish: Tested and Documented",
            "Harden the backend for your problem domain. Write automated tests for the main "
            "flows, publish OpenAPI docs, and deploy the service.\n\n"
            "**Deliverables:** test coverage report, interactive docs, a deployed URL.",
        ),
    ],
    "ml": [
        (
            "{skill} Foundations: Know Your Data",
            "Collect or pick a public dataset that fits your problem domain. Clean it and "
            "produce an exploratory analysis notebook.\n\n"
            "**Deliverables:** summary statistics, three insightful plots, a data dictionary.",
        ),
        (
            "{skill} Baseline: First Model",
            "Frame a prediction task for your problem domain and train a simple baseline "
            "model. Choose and justify an evaluation metric.\n\n"
            "**Deliverables:** a train/validation split, baseline score, confusion matrix or residual plot.",
        ),
        (
            "{skill} Improvement: Beat the Baseline",
            "Improve the model for your problem domain through feature engineering and "
            "hyperparameter tuning.\n\n"
            "**Deliverables:** an experiment log, the best configuration, a metric delta over day 2.",
        ),
        (
            "{skill} Serving: Inference API",
            "Wrap the best model for your problem domain in an HTTP inference endpoint that "
            "validates inputs and returns predictions with confidence.\n\n"
            "**Deliverables:** a serialized model, a prediction endpoint, latency measurements.",
        ),
        (
            "{skill} Polish: Explain and Demo",
            "Analyse the errors the model makes in your problem domain, add an explanation "
            "for individual predictions, and build a small demo UI.\n\n"
            "**Deliverables:** an error analysis summary, feature importance, a recorded demo.",
        ),
    ],
    "design": [
        (
            "{skill} Foundations: Research and Personas",
            "Interview or survey potential users in your problem domain and synthesise two "
            "personas with goals and pain points.\n\n"
            "**Deliverables:** research notes, two persona cards, a problem statement.",
        ),
        (
            "{skill} Structure: Flows and Wireframes",
            "Map the main user journey for your problem domain and sketch low-fidelity "
            "wireframes for every screen in it.\n\n"
            "**Deliverables:** a user flow diagram, wireframes, annotated decisions.",
        ),
        (
            "{skill} Visuals: High-fidelity Mockups",
            "Turn the wireframes for your problem domain into high-fidelity mockups backed by "
            "a small design system.\n\n"
            "**Deliverables:** colour and type scales, five components, three polished screens.",
        ),
        (
            "{skill} Prototype: Make It Clickable",
            "Link the mockups for your problem domain into an interactive prototype that "
            "covers the happy path and one error path.\n\n"
            "**Deliverables:** a shareable prototype link, micro-interactions, a flow walkthrough.",
        ),
        (
            "{skill} Polish: Test and Present",
            "Run a usability test of the prototype for your problem domain with at least "
            "three people and iterate on the findings.\n\n"
            "**Deliverables:** test script, findings table, before/after screens, pitch slides.",
        ),
    ],
    "general": [
        (
            "{skill} Foundations: Architecture Blueprint",
            "Break down your problem domain into requirements and design a solution "
            "architecture you can build with {skill}.\n\n"
            "**Deliverables:** a requirements list, an architecture diagram, a repository scaffold.",
        ),
        (
            "{skill} Core Feature: The Main Workflow",
            "Implement the single most important workflow for your problem domain end to end, "
            "even if other parts are stubbed.\n\n"
            "**Deliverables:** working code for the workflow, a short usage guide.",
        ),
        (
            "{skill} Data: Store and Validate",
            "Add persistence for the data in your problem domain with validation of every "
            "input that reaches storage.\n\n"
            "**Deliverables:** a schema, validation rules, seed data.",
        ),
        (
            "{skill} Integration: Connect the Pieces",
            "Integrate the components built so far for your problem domain and handle "
            "failures between them gracefully.\n\n"
            "**Deliverables:** an end-to-end run, error handling, a logging setup.",
        ),
        (
            "{skill} Polish: Demo Ready",
            "Prepare the solution for your problem domain for judging: tests, a README, and a "
            "five-minute demo script.\n\n"
            "**Deliverables:** automated tests, documentation, a recorded walkthrough.",
        ),
    ],
}

# ============ Daily problem generation (Groq) ============
PROBLEM_GEN_SYSTEM = (
    "You are a hackathon mentor preparing a student for the Smart India Hackathon. "
    "Every day you hand out one focused, buildable coding challenge that moves the student "
    "closer to a working prototype for their chosen problem statement."
)

PROBLEM_GEN_PROMPT = """
You will receive:
1) skills: the student's skills in decreasing order of confidence
2) problem_statement: the hackathon problem statement the student is targeting
3) previous_problems: titles of the challenges already given, in order
4) day_number and today's curriculum stage

Your task:
Write the challenge for day <day_number>. It must:
- Build on the previous challenges without repeating them.
- Follow today's curriculum stage: <stage>
- Lean on the primary skill (<primary_skill>) and fit in a single day of work.
- Be directly useful for the problem statement.
- List concrete deliverables and acceptance criteria. Markdown and $LaTeX$ are allowed.

Inputs:
skills: <skills>
problem_statement:
<<<
<problem_statement>
>>>
previous_problems:
<previous_problems>

<OUTPUT>
Reply in exactly this format and nothing else:
Title: <one-line challenge title>
Description: <full challenge description, may span several lines>
</OUTPUT>
"""
