"""Customer Support Triage Specialist template."""

from voice_matrix.domain.templates.schemas import Template

SUPPORT_INTRODUCTION = """You are a highly skilled customer support specialist with expertise in quickly understanding and resolving customer issues. Your approach is:

- Empathetic and patient with frustrated customers
- Systematic in problem diagnosis and resolution
- Knowledgeable about common issues and solutions
- Efficient in gathering necessary information
- Proactive in setting expectations and follow-up

Your primary goals are to:
1. Understand the customer's issue completely
2. Provide immediate resolution when possible
3. Escalate effectively with full context when needed
4. Ensure customer satisfaction and confidence"""

ISSUE_DIAGNOSIS_FRAMEWORK = """**Systematic Issue Assessment Process:**

**1. Issue Identification (30-60 seconds)**
- "I'm here to help! Can you describe what's happening?"
- "When did you first notice this issue?"
- "What were you trying to do when this occurred?"
- "Has this happened before, or is this the first time?"

**2. Impact Assessment (30 seconds)**
- "How is this affecting your work/business right now?"
- "Is this blocking you from completing important tasks?"
- "Are other team members experiencing the same issue?"

**3. Environment & Context Gathering (60-90 seconds)**
- "What device/browser are you using?"
- "Have there been any recent changes to your account or system?"
- "What error messages, if any, are you seeing?"
- "Can you walk me through the exact steps you took?"

**4. Initial Troubleshooting (2-3 minutes)**
- Implement known solutions for common issues
- Guide customer through step-by-step resolution
- Verify each step completion before proceeding
- Document what works and what doesn't

**5. Resolution or Escalation Decision (30 seconds)**
- If resolved: Confirm solution, provide prevention tips, ensure satisfaction
- If escalation needed: Explain next steps, set expectations, provide ticket/reference number

**Issue Severity Classification:**
- **Critical**: System down, security breach, data loss, business-stopping
- **High**: Major feature broken, affecting multiple users, revenue impact
- **Medium**: Single feature issue, workaround available, limited impact
- **Low**: Enhancement request, cosmetic issue, question/how-to"""

CUSTOMER_SATISFACTION_PROCESS = """**Resolution Confirmation Process:**

**For Resolved Issues:**
1. "Let me confirm the solution is working for you..."
2. "I've documented the steps we took in case you need them again"
3. "Is there anything else I can help you with today?"
4. "You should receive a follow-up email with a summary and any additional resources"

**For Escalated Issues:**
1. "I'm escalating this to our [specialist team] who can provide more detailed assistance"
2. "You'll receive an email with your ticket number: [TICKET-XXX]"
3. "They'll contact you within [timeframe] to continue working on this"
4. "Is the email address [EMAIL] the best way to reach you?"

**Customer Satisfaction Check:**
- "On a scale of 1-10, how would you rate your support experience today?"
- "Is there anything we could have done better?"

**Follow-up Commitment:**
- Always confirm next steps and timeframes
- Provide ticket numbers or reference IDs
- Set clear expectations for response times
- Offer alternative contact methods if needed"""

DETAILED_INSTRUCTIONS = """This template implements a systematic approach to customer support that prioritizes rapid issue resolution while maintaining high customer satisfaction. The AI agent acts as a skilled first-line support representative with access to comprehensive troubleshooting knowledge.

**Setup Instructions:**
1. Customize company/support team branding
2. Input comprehensive common issues and solutions
3. Define clear escalation criteria and routing rules
4. Set business hours and response time expectations
5. Configure knowledge base and resource links
6. Test with various issue scenarios"""


CUSTOMER_SUPPORT_TRIAGE_TEMPLATE = Template.model_validate(
    {
        "id": "customer-support-triage-v1",
        "name": "Customer Support Triage Specialist",
        "version": "1.0.0",
        "status": "active",
        "category": {
            "primary": "support",
            "secondary": "customer_success",
            "functional_area": "inbound",
            "interaction_type": "transactional",
        },
        "industries": ["general", "saas", "ecommerce", "healthcare", "financial_services"],
        "complexity": "advanced",
        "use_case": {
            "title": "Intelligent Support Request Triage & Resolution",
            "description": (
                "Efficiently categorizes support requests, provides immediate resolution for common "
                "issues, and escalates complex problems to appropriate specialists with complete context."
            ),
            "typical_scenarios": [
                "Technical issues and troubleshooting requests",
                "Account and billing inquiries",
                "Product usage questions and how-to requests",
                "Service outage reports and status updates",
                "Feature requests and feedback collection",
            ],
            "expected_outcomes": [
                "50-70% first-call resolution rate for common issues",
                "60-80% reduction in support ticket volume",
                "90%+ accurate issue categorization and routing",
                "40-60% improvement in customer satisfaction scores",
            ],
            "avg_call_duration": 360,
            "success_rate": 85,
        },
        "business_objectives": [
            {
                "id": "issue-categorization",
                "name": "Accurate Issue Categorization",
                "description": "Quickly identify and categorize the type and severity of customer issues",
                "success_criteria": [
                    "Issue type correctly identified (technical, billing, account, etc.)",
                    "Severity level accurately assessed (low, medium, high, critical)",
                    "Appropriate department/specialist identified for escalation",
                ],
                "priority": "high",
            },
            {
                "id": "immediate-resolution",
                "name": "First-Call Resolution",
                "description": "Resolve common issues immediately without requiring escalation",
                "success_criteria": [
                    "Common issues resolved within the call",
                    "Customer receives complete solution and confirmation",
                    "Follow-up steps clearly communicated",
                ],
                "priority": "high",
            },
            {
                "id": "context-preservation",
                "name": "Complete Context Handoff",
                "description": "Ensure escalated issues include comprehensive context for specialists",
                "success_criteria": [
                    "Complete issue description documented",
                    "Troubleshooting steps attempted recorded",
                    "Customer information and preferences noted",
                ],
                "priority": "medium",
            },
        ],
        "segments": [
            {
                "id": "support-introduction",
                "type": "foundation",
                "label": "Support Agent Introduction",
                "content": SUPPORT_INTRODUCTION,
                "business_purpose": "Establish empathetic, solution-focused support relationship",
                "impact_level": "critical",
            },
            {
                "id": "company-support-name",
                "type": "dynamic",
                "label": "Company/Support Team Name",
                "validation": {
                    "requirement": "required",
                    "rules": [
                        {
                            "type": "length",
                            "min": 2,
                            "max": 100,
                            "error_message": "Support team name is required",
                            "severity": "error",
                        }
                    ],
                },
                "business_purpose": "Personalize support experience with company branding",
                "impact_level": "important",
                "placeholder": "Enter your company or support team name",
                "examples": ["Acme Support Team", "TechSolutions Customer Success", "Premium Support Services"],
            },
            {
                "id": "common-issues-knowledge",
                "type": "dynamic",
                "label": "Common Issues & Solutions",
                "validation": {
                    "requirement": "required",
                    "rules": [
                        {
                            "type": "length",
                            "min": 100,
                            "max": 1000,
                            "error_message": "Provide comprehensive common issues and solutions",
                            "severity": "error",
                        }
                    ],
                },
                "business_purpose": "Enable immediate resolution of frequent customer issues",
                "impact_level": "critical",
                "placeholder": "List common issues and their step-by-step solutions",
                "help_text": "Include detailed troubleshooting steps for each common issue. Format: Issue -> Solution steps",
                "examples": [
                    "Login Issues -> 1) Verify email address 2) Check password reset email 3) Clear browser cache 4) Try incognito mode",
                    "Billing Questions -> 1) Verify account status 2) Explain current plan features 3) Review recent charges 4) Provide billing contact",
                ],
            },
            {
                "id": "escalation-criteria",
                "type": "dynamic",
                "label": "Escalation Criteria & Routing",
                "validation": {
                    "requirement": "required",
                    "rules": [
                        {
                            "type": "length",
                            "min": 50,
                            "max": 500,
                            "error_message": "Define clear escalation criteria and routing rules",
                            "severity": "error",
                        }
                    ],
                },
                "business_purpose": "Ensure appropriate issue routing and specialist assignment",
                "impact_level": "critical",
                "placeholder": "Define when and how to escalate issues to specialists",
                "help_text": "Specify criteria for different escalation levels and which team/person handles each type",
                "examples": [
                    "Critical/System Down -> Immediately to Engineering Lead. Security Issues -> Security Team. Refund Requests -> Manager Approval Required.",
                ],
            },
            {
                "id": "business-hours-info",
                "type": "dynamic",
                "label": "Business Hours & Availability",
                "validation": {
                    "requirement": "required",
                    "rules": [
                        {
                            "type": "length",
                            "min": 20,
                            "max": 200,
                            "error_message": "Provide clear business hours and availability information",
                            "severity": "error",
                        }
                    ],
                },
                "business_purpose": "Set proper expectations for response times and availability",
                "impact_level": "important",
                "placeholder": "Enter your support hours, response times, and emergency procedures",
                "examples": [
                    "Monday-Friday 8AM-6PM EST. Email support 24/7 with 4-hour response. Emergency hotline available weekends.",
                ],
            },
            {
                "id": "issue-diagnosis-framework",
                "type": "business_rule",
                "label": "Issue Diagnosis Framework",
                "content": ISSUE_DIAGNOSIS_FRAMEWORK,
                "business_purpose": "Ensure consistent, thorough issue diagnosis and resolution",
                "impact_level": "critical",
            },
            {
                "id": "knowledge-base-access",
                "type": "dynamic",
                "label": "Knowledge Base & Resources",
                "validation": {
                    "requirement": "optional",
                    "rules": [
                        {
                            "type": "length",
                            "min": 30,
                            "max": 400,
                            "error_message": "Provide helpful resource links and knowledge base information",
                            "severity": "info",
                        }
                    ],
                },
                "business_purpose": "Provide customers with self-service resources for future issues",
                "impact_level": "important",
                "placeholder": "List helpful resources, documentation links, and knowledge base articles",
                "examples": [
                    "Help Center: help.company.com | FAQ: company.com/faq | Status Page: status.company.com",
                ],
            },
            {
                "id": "customer-satisfaction-process",
                "type": "business_rule",
                "label": "Customer Satisfaction & Follow-up",
                "content": CUSTOMER_SATISFACTION_PROCESS,
                "business_purpose": "Ensure customer satisfaction and continuous improvement",
                "impact_level": "important",
            },
        ],
        "platform": {
            "model": {
                "provider": "openai",
                "model_name": "gpt-4-turbo-preview",
                "temperature": 0.2,
                "max_tokens": 250,
                "system_prompt_optimization": "empathy",
            },
            "voice": {
                "provider": "elevenlabs",
                "voice_id": "EXAVITQu4vr4xnSDxMaL",
                "voice_name": "Bella Support",
                "gender": "female",
                "age": "young",
                "accent": "american",
                "personality": "calm",
                "speed": 0.95,
                "stability": 0.9,
                "clarity": 0.95,
                "style": 0.1,
            },
            "conversation": {
                "first_message": (
                    "Hello! Thank you for contacting {company_name} support. I'm here to help resolve "
                    "any issues you're experiencing. What can I assist you with today?"
                ),
                "end_call_message": (
                    "Thank you for contacting support today. I'm glad I could help! If you need "
                    "anything else, don't hesitate to reach out. Have a great day!"
                ),
                "transfer_message": (
                    "I'm going to connect you with a specialist who can provide more detailed "
                    "assistance with this issue. Please hold while I transfer you."
                ),
                "max_duration_seconds": 900,
                "silence_timeout_seconds": 15,
                "response_delay_seconds": 0.2,
                "num_words_to_interrupt_assistant": 2,
            },
            "business_rules": {
                "escalation_triggers": [
                    {
                        "type": "keyword",
                        "keywords": ["billing dispute", "charge dispute", "unauthorized charge", "fraud"],
                        "action": "transfer_to_human",
                        "message": (
                            "I understand this is a serious concern. Let me connect you immediately "
                            "with our billing specialist."
                        ),
                        "priority": "immediate",
                    },
                    {
                        "type": "sentiment",
                        "threshold": -0.6,
                        "action": "transfer_to_human",
                        "message": (
                            "I can hear that you're frustrated, and I want to make sure you get the "
                            "best possible help. Let me connect you with a manager."
                        ),
                        "priority": "high",
                    },
                    {
                        "type": "keyword",
                        "keywords": ["data loss", "security breach", "hack", "compromised"],
                        "action": "transfer_to_human",
                        "message": (
                            "This requires immediate attention from our security team. I'm "
                            "transferring you now."
                        ),
                        "priority": "immediate",
                    },
                ],
                "data_collection": [
                    {
                        "field_name": "account_identifier",
                        "collection_prompt": "Can you provide your account email or customer ID?",
                        "confirmation_prompt": "I have your account as {account_identifier}. Is that correct?",
                    },
                    {
                        "field_name": "issue_description",
                        "collection_prompt": "Can you describe the issue you're experiencing in detail?",
                        "max_attempts": 1,
                    },
                    {
                        "field_name": "steps_attempted",
                        "required": False,
                        "collection_prompt": "Have you tried any troubleshooting steps already?",
                        "max_attempts": 1,
                    },
                ],
                "compliance": [
                    {
                        "type": "gdpr",
                        "requirement": "Data access and processing consent",
                        "enforcement": "strict",
                        "disclaimer_text": (
                            "To assist you, I may need to access your account information. Is that okay?"
                        ),
                    }
                ],
            },
            "webhook": {
                "url": "https://api.voicematrix.com/webhooks/customer-support",
                "events": ["call_end", "escalation_triggered", "data_collected"],
            },
        },
        "performance": {
            "kpis": {
                "primary_metric": "resolution_rate",
                "secondary_metrics": [
                    "customer_satisfaction",
                    "escalation_rate",
                    "average_handle_time",
                ],
                "benchmark_targets": {
                    "resolution_rate": 70,
                    "customer_satisfaction": 4.5,
                    "escalation_rate": 25,
                    "average_handle_time": 360,
                },
            },
            "analytics": {"track_sentiment_changes": True},
        },
        "user_experience": {
            "estimated_setup_time": 20,
            "required_skills": [
                "Customer service experience",
                "Technical troubleshooting knowledge",
                "Escalation procedures",
            ],
            "difficulty": "intermediate",
            "prerequisites": [
                "Comprehensive knowledge base of common issues",
                "Clear escalation procedures and contacts",
                "Access to customer account systems",
            ],
        },
        "metadata": {
            "created_at": "2024-01-15T00:00:00Z",
            "updated_at": "2024-01-15T00:00:00Z",
            "created_by": "voice-matrix-team",
            "tags": ["support", "customer-service", "troubleshooting", "triage", "escalation"],
        },
        "documentation": {
            "description": (
                "An advanced customer support triage system that efficiently categorizes issues, "
                "provides immediate resolution for common problems, and escalates complex cases with "
                "complete context to appropriate specialists."
            ),
            "detailed_instructions": DETAILED_INSTRUCTIONS,
            "best_practices": [
                "Always acknowledge customer frustration with empathy",
                "Gather complete information before attempting solutions",
                "Document all troubleshooting steps for escalation context",
                "Provide clear next steps and expectations for every interaction",
                "Follow up to ensure resolution satisfaction",
            ],
            "common_pitfalls": [
                "Rushing to solutions without understanding the complete issue",
                "Escalating too quickly without attempting basic troubleshooting",
                "Failing to collect account information for proper context",
                "Not setting clear expectations for escalated issues",
            ],
            "success_stories": [
                {
                    "company": "CloudTech Solutions",
                    "industry": "SaaS",
                    "challenge": "Support team overwhelmed with 200+ daily tickets, 3-hour average response time",
                    "solution": "Deployed support triage assistant to handle initial contact and common issues",
                    "results": "Reduced ticket volume by 65%, improved first-call resolution to 72%, cut response time to 45 minutes",
                    "metrics": {
                        "ticket_volume_reduction": 65,
                        "first_call_resolution": 72,
                        "response_time_improvement": 75,
                    },
                }
            ],
        },
    }
)
