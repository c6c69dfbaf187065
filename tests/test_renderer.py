import pytest

from tfc_executor import TerraformVariable, renderer
from tfc_executor.exception import InvalidVariableKeyException


@pytest.fixture
def variables():
    return [
        TerraformVariable("region", "us-east-1", False),
        TerraformVariable("tags", '{ env = "prod" }', True),
        TerraformVariable("empty", "", False),
    ]


class TestCliArgs(object):
    def test_cli_args(self, variables):
        assert renderer.cli_args(variables) == [
            "-var",
            "region=us-east-1",
            "-var",
            'tags={ env = "prod" }',
            "-var",
            "empty=",
        ]

    def test_last_definition_wins(self):
        args = renderer.cli_args(
            [
                TerraformVariable("region", "us-east-1"),
                TerraformVariable("zone", "a"),
                TerraformVariable("region", "eu-west-3"),
            ]
        )
        assert args == ["-var", "zone=a", "-var", "region=eu-west-3"]

    def test_no_variables(self):
        assert renderer.cli_args([]) == []


class TestEnvironment(object):
    def test_environment(self, variables):
        assert renderer.environment(variables) == {
            "TF_VAR_region": "us-east-1",
            "TF_VAR_tags": '{ env = "prod" }',
            "TF_VAR_empty": "",
        }

    def test_base_is_copied(self):
        base = {"TF_LOG": "DEBUG", "TF_VAR_region": "old"}
        env = renderer.environment([TerraformVariable("region", "new")], base=base)
        assert env == {"TF_LOG": "DEBUG", "TF_VAR_region": "new"}
        assert base["TF_VAR_region"] == "old"


class TestTfvars(object):
    def test_tfvars(self, variables):
        assert renderer.tfvars(variables) == (
            'region = "us-east-1"\n' 'tags = { env = "prod" }\n' 'empty = ""\n'
        )

    def test_no_variables(self):
        assert renderer.tfvars([]) == ""

    @pytest.mark.parametrize(
        "value, expected",
        [
            ('say "hi"', '"say \\"hi\\""'),
            ("C:\\temp", '"C:\\\\temp"'),
            ("line1\nline2", '"line1\\nline2"'),
            ("a\tb\r", '"a\\tb\\r"'),
            ("${var.region}", '"$${var.region}"'),
            ("%{ if true }", '"%%{ if true }"'),
            ("$5 and 100%", '"$5 and 100%"'),
        ],
    )
    def test_quote_string(self, value, expected):
        assert renderer.quote_string(value) == expected

    def test_hcl_value_is_not_escaped(self):
        value = '{\n  name = "${local.prefix}-app"\n}'
        content = renderer.tfvars([TerraformVariable("app", value, True)])
        assert content == f"app = {value}\n"

    def test_write_tfvars(self, tmp_path, variables):
        path = tmp_path / "terraform.tfvars"
        content = renderer.write_tfvars(path, variables)
        assert path.read_text(encoding="utf-8") == content
        assert content.startswith('region = "us-east-1"\n')


class TestInvalidKeys(object):
    @pytest.mark.parametrize(
        "key",
        ["", "1st", "with space", "dot.ted", "TF_VAR_x=y", "region\n", "\nregion", "re\ngion"],
    )
    def test_invalid_key(self, key):
        variable = TerraformVariable(key, "value")
        for render in (renderer.cli_args, renderer.environment, renderer.tfvars):
            with pytest.raises(InvalidVariableKeyException):
                render([variable])

    @pytest.mark.parametrize("key", ["region", "_private", "my-var", "Var_2"])
    def test_valid_key(self, key):
        assert renderer.cli_args([TerraformVariable(key, "v")]) == ["-var", f"{key}=v"]
