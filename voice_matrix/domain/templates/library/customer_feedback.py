"""Customer Feedback Collector template (NPS and testimonials)."""

from voice_matrix.domain.templates.schemas import Template

FEEDBACK_INTRODUCTION = """You are a friendly and professional customer feedback specialist who helps companies understand customer experiences and improve their services. Your approach is:

- Warm and appreciative of the customer's time
- Genuinely interested in their experience and opinions
- Systematic in gathering comprehensive feedback
- Encouraging when collecting both positive and negative feedback
- Respectful of their privacy and preferences

Your primary goals are to:
1. Make customers feel heard and valued
2. Collect honest, detailed feedback about their experience
3. Identify specific areas for improvement
4. Gather actionable insights for business enhancement
5. Ensure appropriate follow-up for any issues identified"""

NPS_FRAMEWORK = """**Net Promoter Score (NPS) Collection Process:**

**NPS Question (Always Ask):**
"On a scale of 0 to 10, how likely are you to recommend us to a friend or colleague?"

**Follow-up Based on Score:**

**Promoters (9-10):**
- "That's wonderful to hear! What specifically made your experience so positive?"
- "Would you be willing to share a brief testimonial about your experience?"
- "Do you know anyone who might benefit from our services?"

**Passives (7-8):**
- "Thank you for that rating. What would it take to make this a 9 or 10 experience?"
- "What could we have done differently to exceed your expectations?"

**Detractors (0-6):**
- "I appreciate your honesty. What was the main factor in your rating?"
- "What specific issues did you experience?"
- "What would need to change for you to consider working with us again?"

**NPS Classification & Actions:**
- **Promoters (9-10)**: Request testimonials, ask for referrals, case study opportunities
- **Passives (7-8)**: Identify improvement opportunities, prevent churn risk
- **Detractors (0-6)**: Immediate issue resolution, retention efforts, process improvement"""

FEEDBACK_COLLECTION_FRAMEWORK = """**Systematic Feedback Collection Process:**

**1. Opening & Context Setting (30 seconds)**
- Thank them for their time and business
- Explain the purpose and importance of their feedback
- Estimate the time needed (3-4 minutes)

**2. Overall Experience Assessment (60 seconds)**
- "Overall, how would you rate your experience with us?"
- "What stands out most about your experience with us?"
- "How did we compare to your expectations?"

**3. Specific Experience Elements (90-120 seconds)**
- Ask custom survey questions relevant to your business
- Probe for specific details and examples
- Encourage both positive and constructive feedback

**4. Net Promoter Score Collection (60 seconds)**
- Ask the standard NPS question (0-10 scale)
- Follow up based on score category (Promoter/Passive/Detractor)

**5. Improvement Suggestions (30-60 seconds)**
- "What's one thing we could do better?"
- "If you could change anything about your experience, what would it be?"

**6. Future Engagement & Follow-up (30 seconds)**
- Determine follow-up preferences
- Offer resolution for any issues identified
- Thank them again for their valuable input

**Conversation Guidelines:**
- Keep questions conversational, not interrogative
- Show genuine interest in their responses
- Validate their feedback and experiences
- End on a positive, forward-looking note"""

TESTIMONIAL_COLLECTION = """**Testimonial Collection for Promoters:**

**When to Request Testimonials:**
- NPS score of 9 or 10
- Positive overall experience feedback
- Specific success stories or outcomes mentioned

**Testimonial Request Approach:**
"It sounds like you've had a really positive experience with us. Would you be willing to share a brief testimonial about your experience? This helps other potential customers understand the value we provide."

**Testimonial Questions:**
- "What was your situation before working with us?"
- "What results or outcomes have you achieved?"
- "What would you tell someone considering our services?"

**Testimonial Usage Permission:**
"Would it be okay if we used your testimonial on our website and marketing materials? We can include your name and company, or keep it anonymous - whatever you prefer.\""""


CUSTOMER_FEEDBACK_TEMPLATE = Template.model_validate(
    {
        "id": "customer-feedback-collector-v1",
        "name": "Customer Feedback Collector",
        "version": "1.0.0",
        "status": "active",
        "category": {
            "primary": "survey",
            "secondary": "feedback",
            "functional_area": "inbound",
            "interaction_type": "informational",
        },
        "industries": [
            "general",
            "saas",
            "ecommerce",
            "healthcare",
            "hospitality",
            "professional_services",
        ],
        "complexity": "basic",
        "use_case": {
            "title": "Systematic Customer Feedback Collection & Analysis",
            "description": (
                "Efficiently collects structured customer feedback, Net Promoter Scores, and "
                "testimonials through conversational surveys that feel natural and engaging."
            ),
            "typical_scenarios": [
                "Post-purchase satisfaction surveys",
                "Service experience feedback collection",
                "Net Promoter Score (NPS) campaigns",
                "Customer testimonial gathering",
            ],
            "expected_outcomes": [
                "60-80% survey completion rate vs 15-25% for email surveys",
                "3-5x more detailed feedback than written surveys",
                "40-60% increase in actionable insights collected",
            ],
            "avg_call_duration": 240,
            "success_rate": 80,
        },
        "business_objectives": [
            {
                "id": "comprehensive-feedback",
                "name": "Comprehensive Feedback Collection",
                "description": "Gather detailed, actionable feedback about customer experience",
                "success_criteria": [
                    "Overall satisfaction rating collected",
                    "Specific experience details gathered",
                    "Improvement suggestions documented",
                ],
                "priority": "high",
            },
            {
                "id": "nps-measurement",
                "name": "Net Promoter Score Assessment",
                "description": "Collect and categorize NPS scores with detailed reasoning",
                "success_criteria": [
                    "NPS score (0-10) collected",
                    "Reasoning for score documented",
                    "Referral opportunities identified",
                ],
                "priority": "high",
            },
            {
                "id": "issue-identification",
                "name": "Issue Identification & Resolution",
                "description": "Identify and triage customer issues for appropriate follow-up",
                "success_criteria": [
                    "Issues clearly documented",
                    "Resolution preferences captured",
                    "Escalation triggers activated when needed",
                ],
                "priority": "medium",
            },
        ],
        "segments": [
            {
                "id": "feedback-introduction",
                "type": "foundation",
                "label": "Feedback Collector Introduction",
                "content": FEEDBACK_INTRODUCTION,
                "business_purpose": "Create comfortable environment for honest feedback sharing",
                "impact_level": "critical",
            },
            {
                "id": "company-experience-context",
                "type": "dynamic",
                "label": "Company & Experience Context",
                "validation": {
                    "requirement": "required",
                    "rules": [
                        {
                            "type": "length",
                            "min": 50,
                            "max": 200,
                            "error_message": "Provide context about the company and customer experience",
                            "severity": "error",
                        }
                    ],
                },
                "business_purpose": "Set context for feedback collection and personalize experience",
                "impact_level": "important",
                "placeholder": "Describe your company and the specific experience you want feedback about",
                "examples": [
                    "TechSolutions Inc and your recent software implementation project that completed last month",
                    "Premier Healthcare Clinic and your recent appointment and treatment experience",
                ],
            },
            {
                "id": "feedback-survey-questions",
                "type": "dynamic",
                "label": "Custom Survey Questions",
                "validation": {
                    "requirement": "required",
                    "rules": [
                        {
                            "type": "length",
                            "min": 100,
                            "max": 600,
                            "error_message": "Provide comprehensive survey questions relevant to your business",
                            "severity": "error",
                        }
                    ],
                },
                "business_purpose": "Gather specific, actionable feedback relevant to business objectives",
                "impact_level": "critical",
                "placeholder": "List specific questions you want to ask about the customer experience",
                "help_text": "Mix rating questions with open-ended ones.",
                "examples": [
                    "How would you rate the overall project outcome? What aspects exceeded expectations? Were there any communication issues? How likely are you to work with us again?",
                ],
            },
            {
                "id": "nps-framework",
                "type": "business_rule",
                "label": "Net Promoter Score Framework",
                "content": NPS_FRAMEWORK,
                "business_purpose": "Systematically collect and categorize NPS feedback for action",
                "impact_level": "critical",
            },
            {
                "id": "issue-resolution-preferences",
                "type": "dynamic",
                "label": "Issue Resolution & Follow-up Preferences",
                "validation": {
                    "requirement": "optional",
                    "rules": [
                        {
                            "type": "length",
                            "min": 30,
                            "max": 250,
                            "error_message": "Describe how issues will be handled and follow-up preferences",
                            "severity": "info",
                        }
                    ],
                },
                "business_purpose": "Ensure proper follow-up and resolution for identified issues",
                "impact_level": "important",
                "placeholder": "Describe how you handle feedback, resolve issues, and follow up with customers",
                "examples": [
                    "Issues are reviewed by our customer success team within 24 hours. We'll contact you directly to discuss resolution.",
                ],
            },
            {
                "id": "feedback-collection-framework",
                "type": "business_rule",
                "label": "Comprehensive Feedback Collection Framework",
                "content": FEEDBACK_COLLECTION_FRAMEWORK,
                "business_purpose": "Ensure comprehensive, systematic feedback collection",
                "impact_level": "critical",
            },
            {
                "id": "testimonial-collection",
                "type": "business_rule",
                "label": "Testimonial & Success Story Collection",
                "content": TESTIMONIAL_COLLECTION,
                "business_purpose": "Systematically collect testimonials and success stories from satisfied customers",
                "impact_level": "medium",
            },
        ],
        "platform": {
            "model": {
                "provider": "openai",
                "model_name": "gpt-4-turbo-preview",
                "temperature": 0.4,
                "max_tokens": 200,
                "system_prompt_optimization": "empathy",
            },
            "voice": {
                "provider": "elevenlabs",
                "voice_id": "EXAVITQu4vr4xnSDxMaL",
                "voice_name": "Bella Feedback",
                "gender": "female",
                "age": "young",
                "accent": "american",
                "personality": "friendly",
                "speed": 1.0,
                "stability": 0.7,
                "clarity": 0.85,
                "style": 0.4,
            },
            "conversation": {
                "first_message": (
                    "Hi! Thank you so much for taking a few minutes to share your feedback about your "
                    "experience with {company_name}. This should only take about 3-4 minutes. How has "
                    "your overall experience been with us?"
                ),
                "end_call_message": (
                    "Thank you so much for sharing your valuable feedback! We truly appreciate your "
                    "time and your business. Have a wonderful day!"
                ),
                "transfer_message": (
                    "I'd like to connect you with our customer success manager who can address your "
                    "concerns directly and personally."
                ),
                "max_duration_seconds": 360,
                "silence_timeout_seconds": 15,
                "response_delay_seconds": 0.3,
                "num_words_to_interrupt_assistant": 3,
            },
            "business_rules": {
                "escalation_triggers": [
                    {
                        "type": "sentiment",
                        "threshold": -0.6,
                        "action": "transfer_to_human",
                        "message": (
                            "I can hear that you've had a frustrating experience. Let me connect you "
                            "with our customer success manager who can address this personally."
                        ),
                        "priority": "immediate",
                    },
                    {
                        "type": "keyword",
                        "keywords": ["complaint", "refund", "cancel", "lawsuit", "terrible", "horrible"],
                        "action": "transfer_to_human",
                        "message": (
                            "I want to make sure your concerns are addressed properly. Let me connect "
                            "you with a manager right away."
                        ),
                        "priority": "high",
                    },
                ],
                "data_collection": [
                    {
                        "field_name": "overall_rating",
                        "collection_prompt": "On a scale of 1-10, how would you rate your overall experience?",
                        "confirmation_prompt": "So that's a {overall_rating} out of 10, correct?",
                    },
                    {
                        "field_name": "nps_score",
                        "validation_pattern": r"^(10|[0-9])$",
                        "collection_prompt": (
                            "On a scale of 0-10, how likely are you to recommend us to a friend or colleague?"
                        ),
                        "confirmation_prompt": "So you'd give us a {nps_score} for likelihood to recommend?",
                    },
                    {
                        "field_name": "feedback_themes",
                        "collection_prompt": "What specific aspects of your experience stood out to you?",
                        "max_attempts": 1,
                    },
                    {
                        "field_name": "improvement_suggestions",
                        "required": False,
                        "collection_prompt": "Is there anything we could do better or improve?",
                        "max_attempts": 1,
                    },
                ],
                "compliance": [
                    {
                        "type": "gdpr",
                        "requirement": "Feedback data usage consent",
                        "enforcement": "flexible",
                        "disclaimer_text": (
                            "We use feedback to improve our services. Is it okay if we include your "
                            "comments in our internal reviews?"
                        ),
                    }
                ],
            },
            "webhook": {
                "url": "https://api.voicematrix.com/webhooks/customer-feedback",
                "events": ["call_end", "data_collected"],
            },
        },
        "performance": {
            "kpis": {
                "primary_metric": "survey_completion_rate",
                "secondary_metrics": [
                    "nps_collection_rate",
                    "feedback_quality_score",
                    "issue_identification_rate",
                ],
                "benchmark_targets": {
                    "survey_completion_rate": 75,
                    "nps_collection_rate": 90,
                    "feedback_quality_score": 4.0,
                    "issue_identification_rate": 85,
                },
            },
            "analytics": {"track_sentiment_changes": True},
        },
        "user_experience": {
            "estimated_setup_time": 8,
            "required_skills": [
                "Customer service knowledge",
                "Survey design basics",
                "Feedback analysis",
            ],
            "difficulty": "beginner",
            "prerequisites": [
                "Clear understanding of feedback objectives",
                "Defined survey questions relevant to business",
                "Process for handling and acting on feedback",
            ],
        },
        "metadata": {
            "created_at": "2024-01-15T00:00:00Z",
            "updated_at": "2024-01-15T00:00:00Z",
            "created_by": "voice-matrix-team",
            "tags": ["feedback", "survey", "nps", "customer-satisfaction", "testimonials"],
        },
        "documentation": {
            "description": (
                "A comprehensive customer feedback collection system that conducts engaging "
                "conversational surveys to gather detailed insights, NPS scores, and testimonials "
                "while identifying issues that need resolution."
            ),
            "detailed_instructions": (
                "Define your company and the experience you want feedback about, write survey "
                "questions relevant to your business, and configure how issues are followed up. "
                "Test the conversation flow with positive and negative responses."
            ),
            "best_practices": [
                "Make customers feel their feedback is genuinely valued and will be acted upon",
                "Ask specific questions that yield actionable insights",
                "Keep surveys conversational rather than interrogative",
                "Always thank customers for their time and honest feedback",
            ],
            "common_pitfalls": [
                "Asking too many questions and losing customer engagement",
                "Not following up on feedback or issues identified",
                "Failing to escalate serious issues immediately",
            ],
            "success_stories": [
                {
                    "company": "ServiceExcellence Corp",
                    "industry": "Professional Services",
                    "challenge": "Low email survey response rates (12%) and limited customer insights",
                    "solution": "Implemented conversational feedback calls with systematic NPS collection",
                    "results": "Increased feedback collection by 480% and improved customer satisfaction by 23%",
                    "metrics": {
                        "response_rate_improvement": 480,
                        "satisfaction_improvement": 23,
                        "issues_identified": 15,
                    },
                }
            ],
        },
    }
)
