"""
Folder question-answering example.

Requires a running Ollama server with the embedding and generation models
pulled, e.g. `ollama pull nomic-embed-text` and `ollama pull llama3.2`.
"""

import asyncio
import sys

from localrag import RAGService, load_config


async def main():
    # Settings come from localrag.yaml when present, defaults otherwise
    settings = load_config()
    if len(sys.argv) > 1:
        settings = settings.model_copy(update={"documents_folder": sys.argv[1]})
    if settings.documents_folder is None:
        print("Usage: python folder_qa.py <documents-folder>")
        return

    service = RAGService()

    print(f"Checking {settings.base_url}...")
    if not await service.test_connection(settings):
        print("Cannot reach Ollama. Start it with: ollama serve")
        return

    count = await service.index_documents(settings, progress=print)
    print(f"Indexed {count} text chunks from '{settings.documents_folder}'.")

    while True:
        try:
            question = input("\nQuestion (empty to quit): ").strip()
        except EOFError:
            break
        if not question:
            break
        answer = await service.query(question, settings)
        print(f"\n{answer}")


if __name__ == "__main__":
    asyncio.run(main())
