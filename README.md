# llmterm

Turn a plain-language description into a shell command, review it, and run it.
Commands come from OpenAI (`gpt-4o`, `gpt-4o-mini`) or from a local Ollama
server (`llama3.1`). The model is told which shell you use (bash / sh, zsh,
fish, dash, ksh, csh or PowerShell) and which operating system you are on.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Setup

Run the configuration step once:

```
llm-term --config
```

You are asked to choose a model:

```
 1 for gpt-4o-mini
 2 for gpt-4o
 3 for ollama (llama3.1)
```

and a maximum number of tokens between 1 and 4096. Invalid answers are asked
again. The settings are written as JSON to `config.json` in the directory of
the running `llm-term` script. If that file cannot be read when you ask for a
command, you are asked for the settings then and they are saved.

For the OpenAI models, set your key in the environment:

```
export OPENAI_API_KEY=placeholder
```

For Ollama, run a server at `http://localhost:11434` with the `llama3.1`
model available; no key is needed.

## Usage

```
llm-term "list all files larger than 100MB in this directory"
```

The suggested command is shown and you are asked `Do you want to execute this
command? (y/n)`. Answering `y` runs it through your shell (`$SHELL`, or
PowerShell on Windows) and prints its output and error output once it
finishes. Either way the command is stored in `cache.json`, next to
`config.json`.

When the same prompt is asked again, the cached command is offered first. If
you decline to run it, you are asked whether to invalidate the cache entry;
answering `y` removes it and queries the model again.

To skip the cache lookup and always query the model:

```
llm-term --disable-cache "show disk usage per directory"
```

Other options: `--version` prints the version, `--help` lists the options.
Run without a prompt, `llm-term` only reminds you to give one or to use
`--config`.

## Library use

- `llmterm.shell.Shell` — an enum of shells. `Shell.detect()` returns the
  current one, `Shell.from_name(name)` classifies a name or path,
  `invocation()` gives the program and flag that run one command line, and
  `description()` a readable name.
- `llmterm.model.Model` — `Model.gpt4o()`, `Model.gpt4o_mini()` and
  `Model.ollama(name)` create models; `get_command(user_prompt, max_tokens)`
  sends a chat completion request and returns the command text, or `None` if
  the answer holds none. Network and HTTP failures, and a missing
  `OPENAI_API_KEY`, raise `ModelError`. `to_json()` / `Model.from_json()`
  give the form stored in the configuration.
- `llmterm.storage` — `Config` (model and `max_tokens`), `load_config`,
  `save_config`, `load_cache`, `save_cache`, `default_config_path` and
  `default_cache_path`.
- `llmterm.cli` — `main(argv=None)` is the `llm-term` command; `ask_config`,
  `load_or_create_config`, `fetch_command` and `execute_command` accept a
  `read` callable in place of `input` where they ask questions.

## Limitations

The suggested command is not checked in any way before it runs; review it
before answering `y`. The configuration menu offers only `llama3.1` for
Ollama, though `Model.ollama(name)` accepts any model name.