from resume_insight.ai.config import AIConfig, load_ai_config
from resume_insight.ai.types import AnalysisTransport

from resume_insight.ai.providers.openai_provider import OpenAITransport


def get_transport(cfg: AIConfig | None = None) -> AnalysisTransport:
    cfg = cfg or load_ai_config()

    if cfg.provider == "openai":
        return OpenAITransport(
            model=cfg.model,
            api_key=cfg.api_key or "",
            base_url=cfg.base_url,
            timeout_s=cfg.timeout_s,
        )

    raise ValueError(f"Unsupported AI_PROVIDER='{cfg.provider}'")
