from functools import partial

import aws_cdk as cdk
from aws_cdk import aws_iam as iam
from aws_cdk import aws_kms as kms
from aws_cdk import aws_lambda as lambda_
from aws_cdk import aws_lambda_event_sources as lambda_event_sources
from aws_cdk import aws_sns as sns
from aws_cdk import aws_ssm as ssm
from constructs import Construct

from sns_notifier.cdk.config import NotifierConfig
from sns_notifier.cdk.helpers import create_resource_name
from sns_notifier.lambdas import PATH as LAMBDAS_PATH
from sns_notifier.lambdas.slack_notifier import constants


class NotifierStack(cdk.Stack):
    def __init__(
        self,
        scope: Construct,
        construct_id: str,
        config: NotifierConfig,
        **kwargs,
    ) -> None:
        super().__init__(scope, construct_id, **kwargs)

        self._config = config
        self._create_resource_name = partial(
            create_resource_name,
            scope=self,
            environment=config.Environment,
        )

        self.alarm_topic = self.create_alarm_topic()

        powertools_layer = lambda_.LayerVersion.from_layer_version_arn(
            self,
            "PowertoolsLayer",
            layer_version_arn=f"arn:aws:lambda:{self.region}:017000801446:layer:AWSLambdaPowertoolsPythonV2:69",
        )

        environment = {constants.SLACK_MONITOR_CHANNEL: config.SlackMonitorChannel}
        if config.SlackWebhookUrl:
            environment[constants.SLACK_WEBHOOK] = config.SlackWebhookUrl
        else:
            environment[constants.SLACK_WEBHOOK_PARAMETER] = (
                config.SlackWebhookParameter
            )

        self.slack_notifier: lambda_.Function = lambda_.Function(
            self,
            "SlackNotifierLambda",
            function_name=self._create_resource_name("SlackNotifierLambda"),
            handler="app.lambda_handler",
            runtime=lambda_.Runtime.PYTHON_3_11,
            code=lambda_.Code.from_asset(LAMBDAS_PATH + "/slack_notifier/"),
            memory_size=128,
            # Leaves headroom above the Slack client's own request timeout
            timeout=cdk.Duration.seconds(15),
            environment=environment,
            layers=[powertools_layer],
        )
        self.slack_notifier.add_event_source(
            lambda_event_sources.SnsEventSource(self.alarm_topic)
        )

        if config.SlackWebhookParameter:
            webhook_parameter = ssm.StringParameter.from_secure_string_parameter_attributes(
                self,
                "SlackWebhookParameter",
                parameter_name=config.SlackWebhookParameter,
            )
            webhook_parameter.grant_read(self.slack_notifier)

        cdk.CfnOutput(self, "AlarmTopicArn", value=self.alarm_topic.topic_arn)

    def create_alarm_topic(self) -> sns.ITopic:
        """Imports the configured alarm topic or creates an encrypted one."""
        if topic_arn := self._config.AlarmTopicArn:
            return sns.Topic.from_topic_arn(self, "AlarmTopic", topic_arn)

        master_key: kms.Key = kms.Key(
            self,
            "AlarmTopicKey",
            description="Master Key for CloudWatch Alarms SNS Topic",
            enable_key_rotation=True,
            removal_policy=cdk.RemovalPolicy.DESTROY,
        )
        # CloudWatch alarm actions publish to the topic with this key
        master_key.add_to_resource_policy(
            iam.PolicyStatement(
                principals=[iam.ServicePrincipal("cloudwatch.amazonaws.com")],
                actions=["kms:Decrypt", "kms:GenerateDataKey*"],
                resources=["*"],
            ),
        )
        alarm_topic = sns.Topic(
            self,
            "AlarmTopic",
            topic_name=self._create_resource_name("AlarmTopic"),
            master_key=master_key,
        )
        alarm_topic.grant_publish(iam.ServicePrincipal("cloudwatch.amazonaws.com"))
        return alarm_topic
