"""
Factory for building LangChain chains from configuration.

Centralizes chain construction logic, making it easy to modify chain behavior
without changing multiple files.
"""

from typing import Optional

from langchain_core.language_models import BaseChatModel
from langchain_core.output_parsers import StrOutputParser
from langchain_core.prompts import ChatPromptTemplate
from langchain_core.runnables import Runnable
from langchain_openai import ChatOpenAI

from config import OPENAI_API_KEY
from core.errors import CredentialAuthError

from .config import CHAIN_CONFIGS, ChainConfig


class ChainFactory:
    """Factory for building LangChain chains from configuration."""

    @staticmethod
    def build_llm(config: ChainConfig, api_key: Optional[str] = None) -> BaseChatModel:
        """
        Create the chat model for *config* (api_key defaults to OPENAI_API_KEY).

        Raises:
            CredentialAuthError: If no OpenAI API key is configured
        """
        if api_key is None:
            api_key = OPENAI_API_KEY
        if not api_key:
            raise CredentialAuthError("Missing OPENAI_API_KEY")
        return ChatOpenAI(model=config.llm_model, temperature=config.temperature, api_key=api_key)

    @staticmethod
    def build_chain(config: ChainConfig, llm: Optional[BaseChatModel] = None) -> Runnable:
        """
        Build a LangChain Runnable from configuration.

        Parameters:
            config: ChainConfig defining the chain
            llm: Chat model to use instead of the configured OpenAI model

        Returns:
            Runnable (prompt | llm | parser) producing plain text
        """
        if llm is None:
            llm = ChainFactory.build_llm(config)

        prompt = ChatPromptTemplate.from_messages([
            ("system", config.system_prompt),
            ("human", config.human_prompt_template),
        ])
        return prompt | llm | StrOutputParser()

    @staticmethod
    def build_chain_by_name(name: str, llm: Optional[BaseChatModel] = None) -> Runnable:
        """
        Build a single chain by name from registry.

        Raises:
            KeyError: If chain name not found in CHAIN_CONFIGS
        """
        if name not in CHAIN_CONFIGS:
            raise KeyError(f"Unknown chain: {name}. Available: {list(CHAIN_CONFIGS.keys())}")
        return ChainFactory.build_chain(CHAIN_CONFIGS[name], llm)
