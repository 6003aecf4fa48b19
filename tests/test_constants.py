from zena.constants import COLOR_MAP, PROMPT_TEMPLATE, build_prompt


def test_prompt_ends_with_quoted_query():
    query = "how to create a zip file in linux"
    prompt = build_prompt(query)
    assert prompt.endswith(f'"{query}"\n')
    assert prompt.startswith("\nYou are an AI terminal assistant.")


def test_prompt_keeps_special_characters_in_query():
    query = 'print 100% of {braces} and "quotes"'
    prompt = build_prompt(query)
    assert f'"{query}"' in prompt
    assert "%s" not in prompt


def test_prompt_only_differs_in_the_query():
    prompt = build_prompt("x")
    before, after = PROMPT_TEMPLATE.split("%s")
    assert prompt == before + "x" + after


def test_prompt_lists_every_known_color():
    prompt = build_prompt("anything")
    for name in COLOR_MAP:
        assert f"'{name}'" in prompt