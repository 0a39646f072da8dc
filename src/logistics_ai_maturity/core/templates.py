"""Static copy text for the AI maturity assessment report.

Everything in the report that does not depend on the computed scores lives
here: per-category profiles and ceiling constants, the recommendation plan,
the transformation phases, risk factors, quick wins, investment priorities,
the milestone label sets, the industry benchmark constants, and the copy
attached to demo assessments.

Keeping the copy text apart from the arithmetic in ``core/scoring.py`` lets
each be tested on its own.
"""

from logistics_ai_maturity.core.models import (
    ActionItem,
    CategoryName,
    CategoryProfile,
    InvestmentPriority,
    Phase,
    QuickWin,
    RecommendationPlan,
    RiskFactor,
    SkillGap,
)

# improvement_potential = ceiling - score, one fixed ceiling per category.
CATEGORY_CEILINGS: dict[CategoryName, float] = {
    CategoryName.DATA_INFRASTRUCTURE: 85.0,
    CategoryName.PROCESS_DIGITALIZATION: 90.0,
    CategoryName.TEAM_READINESS: 85.0,
    CategoryName.TECHNOLOGY_ADOPTION: 80.0,
    CategoryName.BUSINESS_ALIGNMENT: 88.0,
    CategoryName.CHANGE_MANAGEMENT: 82.0,
}

CATEGORY_PROFILES: dict[CategoryName, CategoryProfile] = {
    CategoryName.DATA_INFRASTRUCTURE: CategoryProfile(
        strengths=(
            "Operational data available",
            "Usable activity history",
            "Structured client base",
        ),
        weaknesses=(
            "Non-integrated data silos",
            "Lack of standardization",
            "Variable data quality",
        ),
        next_steps=(
            "Full audit of data sources",
            "Set up a centralized data lake",
            "Standardize formats and APIs",
        ),
        benchmark_position="Below industry average",
    ),
    CategoryName.PROCESS_DIGITALIZATION: CategoryProfile(
        strengths=(
            "Established business processes",
            "Documented workflows",
            "Operational systems in place",
        ),
        weaknesses=(
            "Limited automation",
            "Many manual processes",
            "High processing times",
        ),
        next_steps=(
            "Map critical processes",
            "Identify bottlenecks",
            "Prioritize automations",
        ),
        benchmark_position="Slightly below average",
    ),
    CategoryName.TEAM_READINESS: CategoryProfile(
        strengths=(
            "Solid business expertise",
            "Experienced teams",
            "Established client relationships",
        ),
        weaknesses=(
            "Limited digital skills",
            "Potential resistance to change",
            "Insufficient AI training",
        ),
        next_steps=(
            "AI training program",
            "Identify change champions",
            "Upskilling plan",
        ),
        benchmark_position="Within industry average",
    ),
    CategoryName.TECHNOLOGY_ADOPTION: CategoryProfile(
        strengths=(
            "Basic IT infrastructure",
            "Functional business systems",
            "Established connectivity",
        ),
        weaknesses=(
            "Dominant legacy technologies",
            "Limited API integrations",
            "No AI tooling",
        ),
        next_steps=(
            "Cloud infrastructure modernization",
            "REST API rollout",
            "Targeted AI tool pilots",
        ),
        benchmark_position="Lagging on innovation",
    ),
    CategoryName.BUSINESS_ALIGNMENT: CategoryProfile(
        strengths=(
            "Clear business objectives",
            "Performance metrics",
            "Strategic vision",
        ),
        weaknesses=(
            "Undefined AI strategy",
            "Digital ROI not measured",
            "Limited innovation",
        ),
        next_steps=(
            "Define an AI strategy",
            "Digital transformation roadmap",
            "Establish innovation KPIs",
        ),
        benchmark_position="Room for improvement",
    ),
    CategoryName.CHANGE_MANAGEMENT: CategoryProfile(
        strengths=(
            "Adaptability",
            "Leadership in place",
            "Continuous improvement culture",
        ),
        weaknesses=(
            "Implementation methodologies",
            "Change communication",
            "Resistance management",
        ),
        next_steps=(
            "Change management framework",
            "AI communication plan",
            "Support program",
        ),
        benchmark_position="Significant improvement potential",
    ),
}

# ---------------------------------------------------------------------------
# Recommendations
# ---------------------------------------------------------------------------

RECOMMENDATION_PLAN = RecommendationPlan(
    immediate=(
        ActionItem(
            action="Detailed AI maturity audit",
            priority="High",
            effort="Low",
            impact="High",
            timeline="2 weeks",
            resources=("AI consultant", "IT team"),
            ai_assistance="Automated diagnostic with personalized recommendations",
        ),
        ActionItem(
            action="AI training for executives",
            priority="High",
            effort="Medium",
            impact="High",
            timeline="1 month",
            resources=("AI trainer", "Management"),
            ai_assistance="Adaptive content and interactive simulations",
        ),
    ),
    short_term=(
        ActionItem(
            action="AI pilot on automated quoting",
            priority="High",
            effort="Medium",
            impact="High",
            timeline="3 months",
            resources=("AI developer", "Sales team"),
            ai_assistance="Intelligent quoting model with continuous learning",
        ),
        ActionItem(
            action="Client data integration",
            priority="Medium",
            effort="High",
            impact="Medium",
            timeline="4 months",
            resources=("Data engineer", "IT team"),
            ai_assistance="Automated data pipeline with AI cleansing",
        ),
    ),
    long_term=(
        ActionItem(
            action="Full AI transformation",
            priority="High",
            effort="High",
            impact="High",
            timeline="12-18 months",
            resources=("Dedicated AI team", "Entire organization"),
            ai_assistance="End-to-end AI orchestration with continuous optimization",
        ),
    ),
    ai_implementation_order=(
        "Claude Sonnet-4 for document analysis",
        "Automated AI quoting engine",
        "Multilingual customer service chatbot",
        "Predictive AI for business optimization",
        "Computer Vision for cargo tracking",
    ),
    skill_development=(
        SkillGap(
            skill="AI fundamentals",
            current_level=2,
            target_level=7,
            training_path=("Business AI training", "Hands-on workshops", "Mentoring"),
            ai_tools=("AI training assistant", "AI simulators"),
        ),
        SkillGap(
            skill="Data management",
            current_level=3,
            target_level=8,
            training_path=("Data management", "APIs and integrations", "Governance"),
            ai_tools=("AI data cleansing tools", "Automated analytics"),
        ),
    ),
)

# ---------------------------------------------------------------------------
# Transformation path
# ---------------------------------------------------------------------------

CURRENT_STATE_TEMPLATE = "Traditional company with {overall_score}% AI maturity"
TARGET_STATE = "AI leader of the logistics sector with 90%+ maturity"

TRANSFORMATION_PHASES: tuple[Phase, ...] = (
    Phase(
        name="AI Foundations",
        duration="3 months",
        objectives=(
            "Establish data infrastructure",
            "Train teams on AI concepts",
            "Deploy first AI tools",
        ),
        ai_capabilities=(
            "Automated data analysis",
            "Intelligent recommendations",
            "Predictive monitoring",
        ),
        prerequisites=(
            "Maturity audit completed",
            "AI team identified",
            "Budget allocated",
        ),
        deliverables=(
            "Operational AI infrastructure",
            "Trained teams",
            "First AI use case deployed",
        ),
    ),
    Phase(
        name="AI Acceleration",
        duration="6 months",
        objectives=(
            "Deploy core business AI",
            "Automate critical processes",
            "Measure AI ROI",
        ),
        ai_capabilities=(
            "Automated quoting",
            "AI customer service",
            "Operational optimization",
        ),
        prerequisites=(
            "AI foundations established",
            "Quality data",
            "User adoption",
        ),
        deliverables=(
            "Productive AI services",
            "Measurable ROI",
            "Optimized processes",
        ),
    ),
    Phase(
        name="AI Excellence",
        duration="9 months",
        objectives=(
            "Full AI orchestration",
            "Continuous innovation",
            "Market leadership",
        ),
        ai_capabilities=(
            "Advanced predictive AI",
            "Global optimization",
            "Automated innovation",
        ),
        prerequisites=(
            "Established AI maturity",
            "Innovation culture",
            "Partner ecosystem",
        ),
        deliverables=(
            "AI competitive advantage",
            "New revenue streams",
            "Leadership position",
        ),
    ),
)

SUCCESS_METRICS: tuple[str, ...] = (
    "AI maturity score > 85%",
    "AI ROI > 300% over 2 years",
    "95% of processes automated",
    "Response time < 1 minute",
    "Client satisfaction > 90%",
)

# Milestone label sets, indexed by bracket: (achievement, ai_deployment).
FOUNDATION_MILESTONE_LABELS: tuple[tuple[str, str], ...] = (
    ("AI infrastructure deployed", "AI Cloud + Data Pipeline"),
    ("Teams trained in AI", "AI training tools"),
    ("First AI service", "Claude Sonnet-4 quoting"),
    ("Foundations complete", "AI monitoring"),
)
FOUNDATION_BUSINESS_VALUES: tuple[str, str] = (
    "Optimal preparation",
    "First measurable gains",
)
FOUNDATION_SUCCESS_CRITERIA: tuple[str, ...] = (
    "Infrastructure operational",
    "Autonomous teams",
    "Initial ROI visible",
)

ACCELERATION_MILESTONE_LABELS: tuple[tuple[str, str], ...] = (
    ("Core AI services deployed", "Quoting engine + Chatbot"),
    ("Process automation", "Computer Vision + ML"),
    ("AI optimization", "Predictive AI"),
    ("ROI confirmed", "Advanced analytics"),
)
ACCELERATION_BUSINESS_VALUES: tuple[str, str] = (
    "Visible transformation",
    "Competitive advantage",
)
ACCELERATION_SUCCESS_CRITERIA: tuple[str, ...] = (
    "70% of processes automated",
    "ROI > 200%",
    "Client satisfaction > 85%",
)

# ---------------------------------------------------------------------------
# Risks, quick wins, investments
# ---------------------------------------------------------------------------

RISK_FACTORS: tuple[RiskFactor, ...] = (
    RiskFactor(
        risk="Team resistance to change",
        probability="Medium",
        impact="Medium",
        mitigation="Personalized support program and progressive training",
        ai_solution="Personal AI coach for every user",
        monitoring_metric="AI tool adoption rate",
    ),
    RiskFactor(
        risk="Insufficient data quality",
        probability="High",
        impact="High",
        mitigation="Automated data audit and cleansing",
        ai_solution="AI data cleansing and enrichment",
        monitoring_metric="Data quality score",
    ),
    RiskFactor(
        risk="Technical integration complexity",
        probability="Medium",
        impact="High",
        mitigation="Microservices architecture and APIs",
        ai_solution="AI-assisted integration tooling",
        monitoring_metric="Average integration time",
    ),
)

QUICK_WINS: tuple[QuickWin, ...] = (
    QuickWin(
        opportunity="Automated quoting with Claude Sonnet-4",
        ai_technology="Anthropic Claude",
        implementation_time="4-6 weeks",
        expected_roi=250,
        complexity="Medium",
        prerequisites=("Team training", "API integration"),
    ),
    QuickWin(
        opportunity="Multilingual customer service chatbot",
        ai_technology="NLP + GPT-4",
        implementation_time="6-8 weeks",
        expected_roi=180,
        complexity="Low",
        prerequisites=("Knowledge base", "Training data"),
    ),
    QuickWin(
        opportunity="Predictive demand analysis",
        ai_technology="Machine Learning",
        implementation_time="8-10 weeks",
        expected_roi=320,
        complexity="High",
        prerequisites=("Historical data", "ML expertise"),
    ),
)

INVESTMENT_PRIORITIES: tuple[InvestmentPriority, ...] = (
    InvestmentPriority(
        area="AI infrastructure",
        investment_range="50K-100K €",
        expected_return="300% over 2 years",
        time_to_value="3-6 months",
        ai_technologies=("AI Cloud", "APIs", "Data Pipeline"),
        business_impact="Foundation for every AI service",
    ),
    InvestmentPriority(
        area="Core AI services",
        investment_range="80K-150K €",
        expected_return="400% over 2 years",
        time_to_value="6-9 months",
        ai_technologies=("Claude Sonnet-4", "GPT-4", "Computer Vision"),
        business_impact="Automation of 70% of processes",
    ),
    InvestmentPriority(
        area="Training and change management",
        investment_range="30K-60K €",
        expected_return="250% over 3 years",
        time_to_value="1-3 months",
        ai_technologies=("AI training platforms", "Collaboration tools"),
        business_impact="Successful adoption and maximized ROI",
    ),
)

# ---------------------------------------------------------------------------
# Industry benchmark
# ---------------------------------------------------------------------------

BENCHMARK_INDUSTRY_AVERAGE: int = 45
BENCHMARK_TOP_QUARTILE: int = 72

# ---------------------------------------------------------------------------
# Demo assessment
# ---------------------------------------------------------------------------

DEMO_NOTE = (
    "This is a demonstration assessment. Contact us for a comprehensive evaluation."
)
DEMO_NEXT_STEPS: tuple[str, ...] = (
    "Prioritize the identified quick wins",
    "Develop the team's skills",
    "Plan the AI infrastructure",
    "Launch a pilot project",
)
# Used when an assessment carries no quick win to quote.
DEMO_DEFAULT_QUICK_WIN_ROI: int = 250
DEMO_TRANSFORMATION_MONTHS: int = 18
