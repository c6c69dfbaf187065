import logging

import pytest

from tfc_executor import JobInputs, TerraformVariable


class TestJobInputs(object):
    def test_add_and_get(self):
        inputs = JobInputs()
        region = inputs.add(TerraformVariable("region", "us-east-1"))
        assert inputs.get("region") is region
        assert inputs["region"] is region
        assert "region" in inputs
        assert len(inputs) == 1

    def test_get_missing(self):
        inputs = JobInputs()
        assert inputs.get("missing") is None
        default = TerraformVariable("missing", "default")
        assert inputs.get("missing", default) is default
        with pytest.raises(KeyError):
            inputs["missing"]

    def test_set_builds_a_variable(self):
        inputs = JobInputs()
        inputs.set("tags", '{ env = "prod" }', hcl=True)
        assert inputs["tags"] == TerraformVariable("tags", '{ env = "prod" }', True)

    def test_last_write_wins(self, caplog):
        inputs = JobInputs([TerraformVariable("region", "us-east-1")])
        inputs.set("zone", "a")
        with caplog.at_level(logging.DEBUG, logger="tfc_executor.job_inputs"):
            inputs.set("region", "eu-west-3")
        assert inputs["region"].value == "eu-west-3"
        assert [var.key for var in inputs] == ["zone", "region"]
        assert "Replacing variable 'region'" in caplog.text

    def test_remove(self):
        inputs = JobInputs([TerraformVariable("region", "us-east-1")])
        removed = inputs.remove("region")
        assert removed.key == "region"
        assert len(inputs) == 0
        with pytest.raises(KeyError):
            inputs.remove("region")

    def test_variables_keep_insertion_order(self):
        keys = ["c", "a", "b"]
        inputs = JobInputs([TerraformVariable(key, key) for key in keys])
        assert [var.key for var in inputs.variables] == keys

    def test_update_other_wins(self):
        inputs = JobInputs(
            [TerraformVariable("region", "us-east-1"), TerraformVariable("zone", "a")],
            environment={"TF_LOG": "INFO", "AWS_PROFILE": "dev"},
        )
        other = JobInputs(
            [TerraformVariable("region", "eu-west-3")], environment={"TF_LOG": "DEBUG"}
        )
        assert inputs.update(other) is inputs
        assert inputs["region"].value == "eu-west-3"
        assert inputs["zone"].value == "a"
        assert inputs.environment == {"TF_LOG": "DEBUG", "AWS_PROFILE": "dev"}

    def test_environment_is_copied(self):
        environment = {"TF_LOG": "INFO"}
        inputs = JobInputs(environment=environment)
        inputs.environment["TF_LOG"] = "DEBUG"
        assert environment == {"TF_LOG": "INFO"}

    def test_mutating_a_record_is_visible(self):
        inputs = JobInputs()
        var = inputs.set("empty", "")
        var.value = "x"
        assert inputs["empty"].value == "x"
        assert inputs.to_cli_args() == ["-var", "empty=x"]


class TestJobInputsRendering(object):
    @pytest.fixture
    def inputs(self):
        return JobInputs(
            [
                TerraformVariable("region", "us-east-1"),
                TerraformVariable("tags", '{ env = "prod" }', True),
            ],
            environment={"AWS_PROFILE": "dev"},
        )

    def test_to_cli_args(self, inputs):
        assert inputs.to_cli_args() == [
            "-var",
            "region=us-east-1",
            "-var",
            'tags={ env = "prod" }',
        ]

    def test_to_environment(self, inputs):
        assert inputs.to_environment() == {
            "AWS_PROFILE": "dev",
            "TF_VAR_region": "us-east-1",
            "TF_VAR_tags": '{ env = "prod" }',
        }

    def test_to_tfvars(self, inputs):
        assert inputs.to_tfvars() == 'region = "us-east-1"\ntags = { env = "prod" }\n'

    def test_write_tfvars(self, inputs, tmp_path):
        path = tmp_path / "job.auto.tfvars"
        inputs.write_tfvars(path)
        assert path.read_text(encoding="utf-8") == inputs.to_tfvars()

    def test_str(self, inputs):
        assert str(inputs) == "JobInputs with 2 variables and 1 environment variables"
