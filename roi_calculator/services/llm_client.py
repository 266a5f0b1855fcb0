# roi_calculator/services/llm_client.py

import json
import logging
from typing import Any, Dict, Optional

from langchain_google_genai import ChatGoogleGenerativeAI
from langchain_core.messages import SystemMessage, HumanMessage

from roi_calculator.config.settings import settings

logger = logging.getLogger("LLMClient")
logger.setLevel(logging.INFO)


class LLMUnavailableError(Exception):
    """Raised when the LLM proxy is called without a configured API key."""
    pass


class LLMRequestError(Exception):
    """Raised when the provider call fails. `message` is safe to show to users."""

    def __init__(self, message: str, details: str = ""):
        super().__init__(message)
        self.message = message
        self.details = details


# -----------------------------------------------------------------------------
# Prompts
# -----------------------------------------------------------------------------

ROI_EXPERT_SYSTEM_PROMPT = """You are an AI ROI expert specializing in helping businesses calculate and understand the return on investment for AI agent deployments.

Your expertise includes:
- AI agent cost-benefit analysis
- Time and cost savings calculations
- Implementation strategies
- Risk assessment
- Best practices for AI adoption

Provide helpful, accurate, and actionable advice. If the user provides ROI calculation data, use it to give more specific insights."""

ESTIMATE_SYSTEM_PROMPT = "You generate strict JSON responses for task automation estimates."

ESTIMATE_PROMPT = """Estimate the workload of the task described below so an ROI calculator can be pre-filled.

TASK DESCRIPTION: "{description}"

Return ONLY a JSON object with exactly these keys:
- "taskFrequency": number of times the task is performed per frequencyUnit
- "frequencyUnit": one of "per day", "per week", "per month", "per year"
- "timePerTask": minutes one person needs to perform the task once
- "taskComplexity": one of "Very Low", "Low", "Medium", "High", "Very High"
- "actionMaturity": one of "Very Low", "Low", "Medium", "High", "Very High" (how well current AI can perform the action)

Do not include markdown code blocks or explanations."""

INSIGHTS_PROMPT = """As an AI automation expert, analyze this ROI calculation and provide exactly 3 highly actionable insights to improve automation ROI:

Task: {task_name}

ROI Summary:
{roi_summary}

Please provide specific, actionable recommendations that focus on:
1. Optimization opportunities to increase ROI
2. Implementation strategies to maximize efficiency gains
3. Risk mitigation and best practices

Format your response as exactly 3 numbered insights. Each insight MUST contain exactly these 3 components in this order:

**Actionable Recommendation:** [A specific, actionable recommendation starting with a strong action verb]
**Best Practice:** [A short tip for implementing the recommendation effectively]
**Key Success Driver:** [A critical factor that ensures the recommendation achieves maximum ROI]

Example format:
1. **Actionable Recommendation:** Implement batch processing to group similar tasks and reduce overhead.
**Best Practice:** Schedule batch processing during off-peak hours for minimal system load.
**Key Success Driver:** Ensure all data sources are properly synchronized to avoid processing delays.

2. [Second insight with same structure]
3. [Third insight with same structure]

Requirements:
- Each component should be 1-2 sentences maximum
- Focus on practical, measurable improvements
- Directly relate to the task and ROI data provided
- Use clear, professional language"""


class LLMClient:
    """
    Thin proxy to Google Gemini for the two advisory calls (estimate prefill
    and improvement insights) and the free-form ROI chat.
    Nothing here feeds back into the ROI estimator.
    """

    def __init__(self, api_key: Optional[str] = None, model_name: Optional[str] = None):
        api_key = api_key or settings.GOOGLE_API_KEY
        self.model_name = model_name or settings.LLM_MODEL

        if not api_key:
            logger.warning("GOOGLE_API_KEY not found. LLM features are disabled.")
            self.llm = None
        else:
            self.llm = ChatGoogleGenerativeAI(
                model=self.model_name,
                temperature=settings.LLM_TEMPERATURE,
                max_output_tokens=settings.LLM_MAX_OUTPUT_TOKENS,
                api_key=api_key,
                request_timeout=settings.LLM_REQUEST_TIMEOUT
            )
            logger.info(f"LLMClient initialized with model: {self.model_name}")

    @property
    def available(self) -> bool:
        return self.llm is not None

    def chat(self, message: str, roi_data: Optional[Dict[str, Any]] = None) -> str:
        """Answers a free-form ROI question, grounded on roi_data when supplied."""
        user_message = message
        if roi_data:
            user_message = f"ROI Data: {json.dumps(roi_data)}\n\nUser Question: {message}"

        return self._invoke([
            SystemMessage(content=ROI_EXPERT_SYSTEM_PROMPT),
            HumanMessage(content=user_message)
        ])

    def suggest_estimates(self, description: str) -> str:
        """Raw model text expected to hold a JSON estimate. Parsing is the caller's job."""
        return self._invoke([
            SystemMessage(content=ESTIMATE_SYSTEM_PROMPT),
            HumanMessage(content=ESTIMATE_PROMPT.format(description=description))
        ])

    def generate_insights(self, task_name: str, roi_summary: Dict[str, Any]) -> str:
        prompt = INSIGHTS_PROMPT.format(
            task_name=task_name,
            roi_summary=json.dumps(roi_summary, indent=2)
        )
        insights = self._invoke([HumanMessage(content=prompt)])

        if not insights:
            raise LLMRequestError("Failed to generate AI insights", "No insights generated")
        return insights

    def _invoke(self, messages) -> str:
        if not self.llm:
            raise LLMUnavailableError(
                "LLM not configured. Please set GOOGLE_API_KEY in your .env file."
            )

        try:
            response = self.llm.invoke(messages)
        except Exception as e:
            logger.error(f"LLM request failed: {e}", exc_info=True)
            raise LLMRequestError(self._describe_error(e), str(e)) from e

        return self._content_text(response.content).strip()

    @staticmethod
    def _content_text(content: Any) -> str:
        """Gemini may return a list of content parts instead of a plain string."""
        if isinstance(content, str):
            return content
        parts = []
        for part in content or []:
            if isinstance(part, str):
                parts.append(part)
            elif isinstance(part, dict) and part.get("type") == "text":
                parts.append(part.get("text", ""))
        return "".join(parts)

    @staticmethod
    def _describe_error(error: Exception) -> str:
        """Maps provider errors to a user-facing message."""
        text = str(error).upper()

        if "API_KEY" in text or "API KEY" in text:
            return "Invalid API key. Please check your GOOGLE_API_KEY configuration."
        if "PERMISSION_DENIED" in text:
            return "Permission denied. Please check your Google Cloud credentials and project configuration."
        if "QUOTA" in text:
            return "LLM quota exceeded. Please check your billing settings."
        if "RESOURCE_EXHAUSTED" in text or "429" in text:
            return "Too many requests. Please try again in a moment."
        if "UNAVAILABLE" in text or "503" in text:
            return "LLM service is temporarily unavailable. Please try again in a moment."
        return "Failed to get AI response"


# Singleton instance
_llm_client_instance = None

def get_llm_client() -> LLMClient:
    """Get or create singleton LLM client instance."""
    global _llm_client_instance
    if _llm_client_instance is None:
        _llm_client_instance = LLMClient()
    return _llm_client_instance
