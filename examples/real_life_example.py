import logging
import os
import subprocess
import sys

from tfc_executor import JobInputs, TFCClient, TerraformVariable

# logging.basicConfig(level=logging.DEBUG)

organization = os.environ.get("TFC_ORGANIZATION", "my-org")
workspace_name = os.environ.get("TFC_WORKSPACE", "my-workspace")
working_directory = sys.argv[1] if len(sys.argv) > 1 else "."

client = TFCClient()

print(f"Reading variables of {organization}/{workspace_name}")
workspace = client.workspace(organization, workspace_name)
inputs = workspace.job_inputs()
for variable in inputs:
    print(" -", variable.key, "(hcl)" if variable.hcl else "")

print("Override the region for this run only")
overrides = JobInputs([TerraformVariable("region", "eu-west-3")])
inputs.update(overrides)

tfvars_path = os.path.join(working_directory, "job.auto.tfvars")
inputs.write_tfvars(tfvars_path)
print(f"Variables written to {tfvars_path}")

env = inputs.to_environment()
env.update({"PATH": os.environ.get("PATH", ""), "TF_IN_AUTOMATION": "1"})
subprocess.run(["terraform", "init", "-input=false"], cwd=working_directory, env=env, check=True)
subprocess.run(
    ["terraform", "plan", "-input=false"] + inputs.to_cli_args(),
    cwd=working_directory,
    env=env,
    check=True,
)
