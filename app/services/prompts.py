from __future__ import annotations

from app.schemas.analysis import PromptVariant

PROMPT_VARIANTS: tuple[PromptVariant, ...] = ("project", "portfolio", "gap_analysis")

PROJECT_ANALYSIS_PROMPT = (
    "You are a senior software engineer and technical recruiter. Analyze the following CV/resume data "
    "and provide BRIEF, CONCISE feedback focusing on PROJECTS and TECHNICAL SKILLS:\n"
    "\n"
    "1. **Project Overview**: 2-3 sentence summary of the most impressive projects found\n"
    "2. **Technical Depth**: 2-3 points on coding complexity and technologies used (use **bold** for emphasis)\n"
    "3. **Project Quality**: 2-3 assessments of code quality, architecture, and best practices "
    "(use **bold** for emphasis)\n"
    "4. **GitHub Analysis**: 2-3 observations about code structure, commits, and collaboration "
    "(use **bold** for emphasis)\n"
    "5. **Skill Assessment**: 2-3 technical skills demonstrated through projects (use **bold** for emphasis)\n"
    "6. **Improvement Areas**: 1-2 suggestions for project portfolio enhancement (use **bold** for emphasis)\n"
    "\n"
    "Focus on:\n"
    "- GitHub repositories and code quality\n"
    "- Project complexity and real-world impact\n"
    "- Technology stack diversity\n"
    "- Code organization and documentation\n"
    "- Deployment and live demos\n"
    "\n"
    "Keep each section brief. Use **bold** formatting for important points. "
    "Total response should be under 250 words."
)

PORTFOLIO_ANALYSIS_PROMPT = (
    "You are a senior software engineer and technical recruiter. Analyze the following CV/resume data "
    "and portfolio links to provide comprehensive feedback with difficulty ratings and gamified scoring:\n"
    "\n"
    "PORTFOLIO LINKS TO ANALYZE: {portfolio_links}\n"
    "\n"
    "ANALYSIS REQUIREMENTS:\n"
    "1. **Project Overview**: 2-3 sentence summary of the most impressive projects found\n"
    "2. **Technical Depth**: 2-3 points on coding complexity and technologies used (use **bold** for emphasis)\n"
    "3. **Project Quality**: 2-3 assessments of code quality, architecture, and best practices "
    "(use **bold** for emphasis)\n"
    "4. **Portfolio Platform Analysis**: Analyze GitHub/Behance/other platforms for:\n"
    "   - Code structure, commits, and collaboration (GitHub)\n"
    "   - Design quality, creativity, and presentation (Behance/art platforms)\n"
    "   - Project diversity and real-world impact\n"
    "5. **Skill Assessment**: 2-3 technical skills demonstrated through projects (use **bold** for emphasis)\n"
    "6. **Difficulty Rating**: Rate each project on a scale of 1-10 for:\n"
    "   - Code complexity (1=beginner, 10=expert)\n"
    "   - Art/Design difficulty (1=basic, 10=professional)\n"
    "   - Overall project sophistication\n"
    "7. **Improvement Areas**: 1-2 suggestions for project portfolio enhancement (use **bold** for emphasis)\n"
    "\n"
    "SCORING SYSTEM:\n"
    "- Calculate overall portfolio score (0-100) and report it as 'Portfolio Score: <number>'\n"
    "- Determine skill level: Novice (0-30), Intermediate (31-60), Advanced (61-80), Expert (81-100)\n"
    "- Provide gamified level: Bronze, Silver, Gold, Platinum, Diamond\n"
    "\n"
    "Focus on:\n"
    "- GitHub repositories and code quality\n"
    "- Behance/art portfolio creativity and technical execution\n"
    "- Project complexity and real-world impact\n"
    "- Technology stack diversity\n"
    "- Code organization and documentation\n"
    "- Deployment and live demos\n"
    "\n"
    "Keep each section brief. Use **bold** formatting for important points. "
    "Include difficulty ratings and gamified scores. Total response should be under 300 words."
)

GAP_ANALYSIS_PROMPT = (
    "You are an AI assistant specialized in career guidance and resume analysis. Analyze the following "
    "resume text and provide a comprehensive report including:\n"
    "\n"
    "1.  **Summary:** A brief overview of the candidate's profile.\n"
    "2.  **Strengths:** Key areas where the candidate excels.\n"
    "3.  **Areas for Improvement:** Sections that could be enhanced.\n"
    "4.  **Keywords:** Important keywords relevant to the candidate's skills and experience.\n"
    "5.  **Job Role Suggestions:** Recommend suitable job roles based on the resume.\n"
    "6.  **Actionable Advice:** Specific steps the candidate can take to improve their resume and "
    "career prospects."
)


def compose_prompt(
    resume_text: str,
    portfolio_links: str | None = None,
    variant: PromptVariant = "portfolio",
) -> str:
    """Build the full Gemini prompt for ``variant``.

    Portfolio links are substituted verbatim; only the ``portfolio`` variant
    has a slot for them.
    """
    links = portfolio_links or ""

    if variant == "project":
        return (
            f"{PROJECT_ANALYSIS_PROMPT}\n\n"
            f"CV/RESUME DATA:\n{resume_text}\n\n"
            "Please provide a concise project analysis based on the above information."
        )

    if variant == "portfolio":
        instructions = PORTFOLIO_ANALYSIS_PROMPT.replace("{portfolio_links}", links)
        return (
            f"{instructions}\n\n"
            f"CV/RESUME DATA:\n{resume_text}\n\n"
            "Please provide a comprehensive portfolio analysis with difficulty ratings and gamified scoring "
            "based on the above information."
        )

    if variant == "gap_analysis":
        return (
            f"{GAP_ANALYSIS_PROMPT}\n\n"
            f'Resume Text:\n"""\n{resume_text}\n"""\n\n'
            "Please format the output in Markdown for readability."
        )

    raise ValueError(f"Unsupported prompt variant '{variant}'")
