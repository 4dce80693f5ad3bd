from typing import Callable

from aws_cdk.assertions import Match, Template


def test_creates_encrypted_alarm_topic(
    notifier_stack_template: Template, _create_resource_name: Callable
):
    notifier_stack_template.has_resource_properties(
        "AWS::SNS::Topic",
        {
            "TopicName": _create_resource_name("AlarmTopic"),
            "KmsMasterKeyId": Match.object_like(
                {"Fn::GetAtt": [Match.string_like_regexp(r"^AlarmTopicKey[\w]*"), "Arn"]}
            ),
        },
    )
    notifier_stack_template.has_resource_properties(
        "AWS::KMS::Key", {"EnableKeyRotation": True}
    )


def test_subscribes_lambda_to_alarm_topic(notifier_stack_template: Template):
    notifier_stack_template.has_resource_properties(
        "AWS::SNS::Subscription",
        {
            "Protocol": "lambda",
            "TopicArn": {"Ref": Match.string_like_regexp(r"^AlarmTopic[\w]*")},
            "Endpoint": Match.object_like(
                {
                    "Fn::GetAtt": [
                        Match.string_like_regexp(r"^SlackNotifierLambda[\w]*"),
                        "Arn",
                    ]
                }
            ),
        },
    )


def test_imports_existing_alarm_topic(imported_topic_stack_template: Template):
    imported_topic_stack_template.resource_count_is("AWS::SNS::Topic", 0)
    imported_topic_stack_template.has_resource_properties(
        "AWS::SNS::Subscription",
        {
            "Protocol": "lambda",
            "TopicArn": "arn:aws:sns:ca-central-1:111111111111:ExistingAlarms",
        },
    )
