from typing import Callable, Optional

from loguru import logger

from commit_ai.config import ConfigStore
from commit_ai.console import log
from commit_ai.enums import ModelName
from commit_ai.errors import ConfigError
from commit_ai.utils.constants import SETUP_COMMAND


def run_setup(store: ConfigStore, input_fn: Optional[Callable[[str], str]] = None) -> int:
    """Interactively store an OpenAI API key and model preference.

    Returns the process exit code.
    """
    ask = input_fn or input
    log.cyan("\n🤖 Welcome to commit-ai setup!\n")

    try:
        existing = store.load()
        if existing.get("api_key"):
            log.warning("An existing API key was found.")
            answer = ask("Do you want to update your OpenAI API key? (y/N): ")
            if answer.strip().lower() != "y":
                log.success("\n✨ Setup complete! Existing configuration kept.\n")
                return 0

        log.info("\nTo use commit-ai, you need an OpenAI API key.")
        log.info("You can get one at: https://platform.openai.com/api-keys")
        log.info(f"Note: Your API key will be stored in {store.path} and never shared.\n")

        api_key = ask("Please enter your OpenAI API key: ").strip()
        if not api_key:
            log.error("\n❌ No API key provided. Setup cancelled.\n")
            log.warning("You can run setup again using:")
            log.warning(f"{SETUP_COMMAND}\n")
            return 1

        current_model = existing.get("model") or ModelName.gpt_4o.value
        model = ask(f"Model to use [{current_model}]: ").strip() or current_model

        store.save({"api_key": api_key, "model": model})

    except (EOFError, KeyboardInterrupt):
        log.error("\n❌ Setup cancelled.\n")
        return 1
    except ConfigError as e:
        logger.error(f"Setup failed: {e}")
        log.error(f"\n❌ Error during setup: {e}")
        return 1

    log.success("\n✅ Setup complete! Your API key has been saved.\n")
    log.info("You can now use cai with:")
    log.cyan("cai --stage\n")
    return 0
