# zena

A command-line assistant. You ask a question in plain language. zena sends it
to the AI provider you have set as default and prints the answer as
colour-coded notes, warnings, errors and commands. Where the answer includes
a revert command, zena prints that as well.

## Installation

```
pip install .
```

## Configuration

On its first run zena writes a default configuration file, with OpenAI as the
default provider and no keys. It reports the file's path on stderr. The file
is at:

- Linux and macOS: `~/.config/zena/config.json`
- Windows: `~/AppData/Local/zena/config.json`

Store API keys and choose the default provider:

```
zena config set openai <your-api-key>
zena config set gemini <your-api-key>
zena config set default gemini
```

`set` accepts `openai`, `anthropic` or `gemini` to store a key, or `default`
to choose the default provider. Provider names are not case-sensitive. Only
one provider is the default at a time.

To list the providers that have a key, with their default flag:

```
zena config --list
```

## Asking questions

```
zena "how to create a zip file in linux"
zena remove a directory recursively in bash
```

zena joins all the arguments into one query. It does this only when the first
argument is not `config` or `version` and does not start with `-`. zena checks
that the default provider has a key, sends the query, and prints the answer
block by block:

- Blocks that are not notes get a `[n] [Type]` header.
- Text is coloured with the colour the provider asked for: red, green, blue,
  orange, yellow or white.
- Revert commands are shown in yellow after `↩ Revert:`.

## Providers

| Provider    | Querying                                                            |
|-------------|---------------------------------------------------------------------|
| `openai`    | chat completions (`gpt-3.5-turbo`); the reply is shown as one blue note |
| `gemini`    | `gemini-2.0-flash`; the reply is read as a JSON array of blocks     |
| `anthropic` | not supported                                                       |

## What zena does not do

You can store an Anthropic key and make Anthropic the default provider, but
zena cannot send queries to it. A query then ends with
`unsupported AI provider: anthropic`. Answers are not streamed. zena prints
each answer once the whole response has arrived.

## Version

```
zena version
```

## Using it from Python

- `zena.providers.fetch_response(query, provider, api_key)` returns a list of
  `zena.responses.AIResponse` blocks. It raises `ProviderAPIError` on failure.
- `zena.render.render_responses(responses)` returns the coloured text.
- `zena.config.load_config(path)` and `zena.config.save_config(config, path)`
  read and write the configuration. Both use the default location when `path`
  is `None`.
- `zena.helpers.get_ai_api_key`, `mark_default` and `validate_key_provider`
  work on the default provider. They raise `ProviderError` on failure.

## Running the tests

```
pip install .[test]
pytest
```